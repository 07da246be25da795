import builtins
import logging

import main


def test_console_runs_lines_until_quit(monkeypatch, capsys) -> None:
    lines = iter(["STICK_SENS = 2", "STICK_SENS", "QUIT", "STICK_SENS = 3"])
    monkeypatch.setattr(builtins, "input", lambda prompt: next(lines))

    from chordshift.profile import Profile
    profile = Profile()
    registry = profile.build_registry()
    main.run_console(registry, "> ", logging.getLogger("chordshift.test.console"))

    assert capsys.readouterr().out == "STICK_SENS has been set to 2.0\nSTICK_SENS = 2.0\n"
    registry.close()


def test_console_stops_at_end_of_input(monkeypatch, capsys) -> None:
    def no_more_input(prompt):
        raise EOFError

    monkeypatch.setattr(builtins, "input", no_more_input)
    main.run_console(main.Profile().build_registry(), "> ", logging.getLogger("chordshift.test.console"))
    assert capsys.readouterr().out == "\n"
