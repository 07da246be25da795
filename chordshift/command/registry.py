#!/usr/bin/env python3
"""
registry.py - Dispatches console lines to commands

Line shape:
    [<button> (',' | '+')] <NAME> [arguments]
    # comment

Several commands may share a name (GYRO_SENS sets both MIN_GYRO_SENS and
MAX_GYRO_SENS); every one of them gets the arguments. A line with a modifier
prefix runs against commands derived for that scope, which are closed as soon
as the line is processed.
"""

import re
from pathlib import Path

from chordshift.command.base import Command

LINE_PATTERN = re.compile(r"\s*(?:(\w+)\s*([,+])\s*)?(\w+)\s*(.*)", re.DOTALL)


class CommandRegistry:
    def __init__(self, log=None):
        self.log = log
        self._commands: dict[str, list[Command]] = {}
        self.add(
            Command("HELP", log)
            .set_parser(self._list_commands)
            .set_help("HELP lists every command. <COMMAND> HELP describes one.")
        )

    def add(self, command: Command) -> Command:
        self._commands.setdefault(command.name.upper(), []).append(command)
        if self.log:
            self.log.debug(f"[REGISTRY] added {command.name}")
        return command

    def get(self, name: str) -> list[Command]:
        return list(self._commands.get(name.upper(), ()))

    def names(self) -> list[str]:
        return sorted(self._commands)

    def remove(self, name: str) -> bool:
        commands = self._commands.pop(name.upper(), None)
        if not commands:
            return False
        for cmd in commands:
            cmd.close()
        return True

    def close(self):
        for name in list(self._commands):
            self.remove(name)

    # ---------------------------------------------------------------
    # Line processing
    # ---------------------------------------------------------------
    def process_line(self, line: str) -> bool:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            return True

        match = LINE_PATTERN.fullmatch(stripped)
        commands = self._commands.get(match.group(3).upper()) if match else None
        if not commands:
            print(f"Unrecognized command: {stripped}")
            return False

        chord, op, name, arguments = match.groups()
        if self.log:
            self.log.debug(f"[REGISTRY] {stripped}")

        if op is None:
            handled = self._run(commands, arguments)
        else:
            derived = [cmd.get_modified_cmd(op, chord) for cmd in commands]
            scoped = [cmd for cmd in derived if cmd is not None]
            if not scoped:
                print(f"Unsupported modifier: {chord}{op}{name}")
                if self.log:
                    self.log.warning(f"[REGISTRY] unsupported modifier in '{stripped}'")
                return False
            try:
                handled = self._run(scoped, arguments)
            finally:
                for cmd in scoped:
                    cmd.close()

        if not handled and arguments != "HELP":
            print(f"Unrecognized command: {stripped}")
        return handled

    @staticmethod
    def _run(commands: list[Command], arguments: str) -> bool:
        handled = False
        for cmd in commands:
            # every command sharing the name sees the arguments
            handled = cmd.parse_data(arguments) or handled
        return handled

    def _list_commands(self, command: Command, arguments: str) -> bool:
        if arguments == "HELP":
            print(command.help)
            return False
        if arguments:
            return False
        print("Available commands:")
        for name in self.names():
            print(f"  {name}")
        return True

    def load_file(self, path) -> bool:
        """Run every line of a script file."""
        try:
            lines = Path(path).read_text(encoding="utf-8").splitlines()
        except OSError as exc:
            if self.log:
                self.log.error(f"[REGISTRY] Cannot read script {path}: {exc}")
            return False

        if self.log:
            self.log.info(f"[REGISTRY] Running {path} ({len(lines)} lines)")
        for line in lines:
            self.process_line(line)
        return True
