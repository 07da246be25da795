import pytest

from chordshift.command.assignment import AssignmentCommand
from chordshift.command.base import Command
from chordshift.profile import non_negative
from chordshift.values.types import ButtonID, StickMode
from chordshift.variable.button import ButtonVariable
from chordshift.variable.variable import Variable


def test_assign_value_reports_change(sens, sens_cmd, capsys) -> None:
    assert sens_cmd.parse_data("= 2.0") is True
    assert sens.get() == 2.0
    assert capsys.readouterr().out == "STICK_SENS has been set to 2.0\n"


def test_malformed_value_shows_help_and_keeps_value(sens, sens_cmd, capsys) -> None:
    sens_cmd.parse_data("= 2.0")
    capsys.readouterr()

    assert sens_cmd.parse_data("abc") is True
    assert sens.get() == 2.0
    assert capsys.readouterr().out == "STICK_SENS help\n"


def test_empty_value_displays_current(sens, sens_cmd, capsys) -> None:
    sens.set(2.0)
    capsys.readouterr()

    assert sens_cmd.parse_data("") is True
    assert capsys.readouterr().out == "STICK_SENS = 2.0\n"


def test_reassigning_current_value_still_confirms(sens, sens_cmd, capsys) -> None:
    assert sens_cmd.parse_data("= 1.0") is True
    assert capsys.readouterr().out == "STICK_SENS has been set to 1.0\n"


def test_help_is_not_an_assignment(sens, sens_cmd, capsys) -> None:
    assert sens_cmd.parse_data("HELP") is False
    assert sens.get() == 1.0
    assert capsys.readouterr().out == "STICK_SENS help\n"


@pytest.mark.parametrize("text", ["= 1,5", "= (2)", "== 3"])
def test_unreadable_line_is_unhandled(sens, sens_cmd, capsys, text) -> None:
    assert sens_cmd.parse_data(text) is False
    assert sens.get() == 1.0
    assert capsys.readouterr().out == ""


def test_whitespace_and_equal_sign_are_optional(sens, sens_cmd) -> None:
    assert sens_cmd.parse_data("  =  3  ") is True
    assert sens.get() == 3.0
    assert sens_cmd.parse_data("4") is True
    assert sens.get() == 4.0


def test_filtered_back_value_confirms_then_shows_help(capsys) -> None:
    var = Variable(1.0, non_negative)
    cmd = AssignmentCommand("STICK_SENS", var).set_help("help")

    assert cmd.parse_data("= -3") is True
    assert var.get() == 1.0
    assert capsys.readouterr().out == "STICK_SENS has been set to 1.0\nhelp\n"


def test_clamped_value_counts_as_success(capsys) -> None:
    var = Variable(1.0, lambda current, requested: min(requested, 3.0))
    cmd = AssignmentCommand("STICK_SENS", var).set_help("help")

    assert cmd.parse_data("= 5") is True
    assert var.get() == 3.0
    assert capsys.readouterr().out == "STICK_SENS has been set to 3.0\n"


def test_missing_parser_is_a_programming_error(sens_cmd) -> None:
    sens_cmd.set_parser(None)
    with pytest.raises(RuntimeError):
        sens_cmd.parse_data("= 1")


def test_assign_returns_stored_value() -> None:
    var = Variable(1.0, non_negative)
    cmd = AssignmentCommand("STICK_SENS", var)
    assert cmd.assign(2.0) == 2.0
    assert cmd.assign(-1.0) == 2.0


def test_display_name_is_used_for_output(sens, capsys) -> None:
    cmd = AssignmentCommand("GYRO_SENS", sens, "MIN_GYRO_SENS")

    cmd.parse_data("")
    cmd.parse_data("= 2")

    assert cmd.name == "GYRO_SENS"
    assert capsys.readouterr().out == "MIN_GYRO_SENS = 1.0\nMIN_GYRO_SENS has been set to 2.0\n"


def test_enum_values_are_read_by_name(capsys) -> None:
    var = Variable(StickMode.NO_MOUSE)
    cmd = AssignmentCommand("RIGHT_STICK_MODE", var)

    assert cmd.parse_data("= aim") is True
    assert var.get() is StickMode.AIM
    assert capsys.readouterr().out == "RIGHT_STICK_MODE has been set to AIM\n"


def test_mapping_confirmation(capsys) -> None:
    button = ButtonVariable(ButtonID.E)
    cmd = AssignmentCommand("E", button)

    cmd.parse_data("= SPACE")
    cmd.parse_data("= Q E")
    cmd.parse_data("= NONE")

    assert capsys.readouterr().out == (
        "E mapped to SPACE\n"
        "E mapped to Q on tap, E on hold\n"
        "E mapped to no input\n"
    )


def test_mapping_display_of_current_value(capsys) -> None:
    button = ButtonVariable(ButtonID.E)
    cmd = AssignmentCommand("E", button)

    cmd.parse_data("^CAPS")
    capsys.readouterr()
    cmd.parse_data("")

    assert capsys.readouterr().out == "E = ^CAPS\n"


def test_close_unsubscribes_once(sens, capsys) -> None:
    cmd = AssignmentCommand("STICK_SENS", sens)
    assert sens.listener_count == 1

    cmd.close()
    cmd.close()

    assert cmd.closed
    assert sens.listener_count == 0
    sens.set(5.0)
    assert capsys.readouterr().out == ""


def test_context_manager_closes(sens) -> None:
    with AssignmentCommand("STICK_SENS", sens) as cmd:
        assert sens.listener_count == 1
    assert cmd.closed
    assert sens.listener_count == 0


def test_plain_command_without_parser_raises() -> None:
    with pytest.raises(RuntimeError, match="PING"):
        Command("PING").parse_data("")
