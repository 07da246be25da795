#!/usr/bin/env python3
"""
assignment.py - Commands that assign a value to a live Variable

    STICK_SENS            show the current value
    STICK_SENS = 2.5      assign
    STICK_SENS HELP       show help
    R,STICK_SENS = 1      modeshift: value while R is held
    R,STICK_SENS = NONE   remove that modeshift
    ZL,E = SPACE          chorded button mapping
    L+R = TAB             simultaneous press mapping

Scoped commands are derived by get_modified_cmd() from the base command and
are meant to be short lived: closing them runs their cleanup task (deferred
removal of now unused entries), then unsubscribes their listener.
"""

import re
from functools import partial
from typing import Optional

from chordshift.command.base import Command
from chordshift.values.codec import Codec, codec_for
from chordshift.values.mapping import EventMapping
from chordshift.values.types import ButtonID
from chordshift.variable.button import ButtonVariable
from chordshift.variable.setting import SettingVariable
from chordshift.variable.variable import Variable

# [=] value, value made of word characters, whitespace, ^ + - .
VALUE_PATTERN = re.compile(r"\s*=?\s*([\^\+\-\.\w\s]*)")


class AssignmentCommand(Command):
    def __init__(self, name: str, var: Variable, display_name: Optional[str] = None,
                 *, codec: Optional[Codec] = None, log=None):
        super().__init__(name, log)
        self.var = var
        # GYRO_SENS is shown as MIN_GYRO_SENS / MAX_GYRO_SENS depending on the bound variable
        self.display_name = display_name if display_name is not None else name
        self.codec = codec if codec is not None else codec_for(type(var.get()))
        self.set_parser(default_parser)
        self._subscription = var.subscribe(self.display_new_value)

    def parse_data(self, arguments: str) -> bool:
        if self._parse is None:
            raise RuntimeError(f"There is no function defined to parse {self.name}.")
        if arguments == "HELP":
            print(self.help)
            return False

        match = VALUE_PATTERN.fullmatch(arguments)
        if match is None:
            if self.log:
                self.log.debug(f"[ASSIGN] {self.name}: cannot read '{arguments}'")
            return False

        if not self._parse(self, match.group(1).strip()):
            print(self.help)
        return True

    def assign(self, value):
        """Push value into the bound variable and return what it stored."""
        return self.var.set(value)

    def display_new_value(self, new_value):
        if isinstance(new_value, EventMapping):
            if new_value.is_empty():
                print(f"{self.name} mapped to no input")
            else:
                print(f"{self.name} mapped to {new_value.representation}")
            return
        print(f"{self.display_name} has been set to {self.codec.encode(new_value)}")

    # ---------------------------------------------------------------
    # Scoped variants
    # ---------------------------------------------------------------
    def get_modified_cmd(self, op: str, chord: str) -> Optional[Command]:
        btn = ButtonID.from_token(chord)
        if btn is not None and btn.is_physical():
            name = f"{btn.name}{op}{self.display_name}"
            var = self.var
            if op == ",":
                if isinstance(var, SettingVariable):
                    return self._derive(
                        name, var.at_chord(btn),
                        partial(modeshift_parser, btn, var),
                        partial(var.process_modeshift_removal, btn),
                    )
                if isinstance(var, ButtonVariable):
                    # A parser built with partial() carries its bound arguments along
                    return self._derive(
                        name, var.at_chord(btn), self._parse,
                        partial(var.process_chord_removal, btn),
                    )
            elif op == "+":
                if isinstance(var, ButtonVariable):
                    return self._derive(
                        name, var.at_sim_press(btn), self._parse,
                        partial(var.process_sim_press_removal, btn),
                    )
        return super().get_modified_cmd(op, chord)

    def _derive(self, name: str, var: Variable, parser, cleanup) -> "AssignmentCommand":
        if self.log:
            self.log.debug(f"[MODIFIER] derived {name} from {self.name}")
        cmd = AssignmentCommand(name, var, codec=self.codec, log=self.log)
        cmd.set_help(self.help).set_parser(parser).set_task_on_destruction(cleanup)
        return cmd

    def _release(self):
        self._subscription.release()


# ---------------------------------------------------------------
# Parse strategies
# ---------------------------------------------------------------
def default_parser(command: AssignmentCommand, data: str) -> bool:
    if not data:
        # No assignment: show the current one
        print(f"{command.display_name} = {command.codec.encode(command.var.get())}")
        return True

    try:
        value = command.codec.decode(data)
    except ValueError as exc:
        if command.log:
            command.log.debug(f"[ASSIGN] {command.name}: {exc}")
        return False

    equals = command.codec.equals
    old_value = command.var.get()
    stored = command.assign(value)

    # Listeners only fire on an actual change; confirm to the user anyway
    if equals(old_value, stored):
        command.display_new_value(stored)

    # False only when a different value was asked for and the variable kept the old one
    return equals(value, old_value) or not equals(stored, old_value)


def modeshift_parser(chord: ButtonID, setting: Optional[SettingVariable],
                     command: AssignmentCommand, data: str) -> bool:
    if setting is not None and data == "NONE":
        setting.mark_modeshift_for_removal(chord)
        print(f"Modeshift {chord.name},{setting.setting_id.name} has been removed.")
        return True
    handled = default_parser(command, data)
    if setting is not None and data and handled:
        # Only an accepted assignment keeps a new modeshift alive
        setting.keep_modeshift(chord)
    return handled
