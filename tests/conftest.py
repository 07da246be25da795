import pytest

from chordshift.command.assignment import AssignmentCommand
from chordshift.profile import Profile
from chordshift.variable.variable import Variable


@pytest.fixture
def sens():
    return Variable(1.0)


@pytest.fixture
def sens_cmd(sens):
    cmd = AssignmentCommand("STICK_SENS", sens).set_help("STICK_SENS help")
    yield cmd
    cmd.close()


@pytest.fixture
def profile():
    return Profile()


@pytest.fixture
def registry(profile):
    reg = profile.build_registry()
    yield reg
    reg.close()
