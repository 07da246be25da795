#!/usr/bin/env python3
"""
profile.py - Root variables of one controller profile and their commands
"""

from chordshift.command.assignment import AssignmentCommand
from chordshift.command.base import Command
from chordshift.command.registry import CommandRegistry
from chordshift.values.types import ButtonID, FloatXY, SettingID, StickMode, TriggerMode
from chordshift.variable.button import ButtonVariable
from chordshift.variable.setting import SettingVariable


# ---------------------------------------------------------------
# Filters: (current, requested) -> stored
# ---------------------------------------------------------------
def non_negative(current, requested):
    return requested if requested >= 0 else current


def non_negative_xy(current, requested):
    return requested if min(requested) >= 0 else current


def unit_range(current, requested):
    return requested if 0.0 <= requested <= 1.0 else current


def positive(current, requested):
    return requested if requested > 0 else current


# setting, default, filter, help
SETTINGS = [
    (SettingID.MIN_GYRO_SENS, FloatXY(0.0, 0.0), non_negative_xy,
     "Gyro sensitivity below MIN_GYRO_THRESHOLD, one value or 'x y'."),
    (SettingID.MAX_GYRO_SENS, FloatXY(0.0, 0.0), non_negative_xy,
     "Gyro sensitivity above MAX_GYRO_THRESHOLD, one value or 'x y'."),
    (SettingID.MIN_GYRO_THRESHOLD, 0.0, non_negative,
     "Gyro speed in degrees per second at which MIN_GYRO_SENS applies."),
    (SettingID.MAX_GYRO_THRESHOLD, 0.0, non_negative,
     "Gyro speed in degrees per second at which MAX_GYRO_SENS applies."),
    (SettingID.GYRO_SMOOTH_THRESHOLD, 0.0, non_negative,
     "Gyro speeds below this are smoothed."),
    (SettingID.STICK_SENS, 360.0, non_negative,
     "Stick aim speed in degrees per second at full tilt."),
    (SettingID.STICK_POWER, 1.0, non_negative,
     "Power curve applied to stick aim."),
    (SettingID.STICK_DEADZONE_INNER, 0.15, unit_range,
     "Stick deflection ignored around the center, between 0 and 1."),
    (SettingID.STICK_DEADZONE_OUTER, 0.1, unit_range,
     "Stick deflection treated as full tilt near the edge, between 0 and 1."),
    (SettingID.LEFT_STICK_MODE, StickMode.NO_MOUSE, None,
     "Left stick mode: " + ", ".join(m.name for m in StickMode)),
    (SettingID.RIGHT_STICK_MODE, StickMode.NO_MOUSE, None,
     "Right stick mode: " + ", ".join(m.name for m in StickMode)),
    (SettingID.MOUSE_RING_RADIUS, 128.0, non_negative,
     "Radius in pixels of the mouse ring stick mode."),
    (SettingID.TRIGGER_THRESHOLD, 0.0, unit_range,
     "Trigger travel registered as a press, between 0 and 1."),
    (SettingID.ZL_MODE, TriggerMode.NO_FULL, None,
     "ZL trigger mode: " + ", ".join(m.name for m in TriggerMode)),
    (SettingID.ZR_MODE, TriggerMode.NO_FULL, None,
     "ZR trigger mode: " + ", ".join(m.name for m in TriggerMode)),
    (SettingID.HOLD_PRESS_TIME, 150, positive,
     "Milliseconds a button must be held to count as a hold."),
    (SettingID.RUMBLE, True, None,
     "Controller rumble, ON or OFF."),
]

# Set through GYRO_SENS only, which shows each under its own name
GYRO_SENS_PAIR = (SettingID.MIN_GYRO_SENS, SettingID.MAX_GYRO_SENS)

BUTTON_HELP = (
    "Map a button to keys: NONE, X (press), ^X (toggle) or X Y (tap X, hold Y). "
    "Combine keys with '+'. Prefix the button with 'CHORD,' or 'PARTNER+' to scope it."
)


class Profile:
    def __init__(self, log=None):
        self.log = log
        self.buttons = {btn: ButtonVariable(btn) for btn in ButtonID if btn.is_physical()}
        self.settings: dict[SettingID, SettingVariable] = {}
        self._help: dict[SettingID, str] = {}
        for setting_id, default, value_filter, help_text in SETTINGS:
            self.settings[setting_id] = SettingVariable(setting_id, default, value_filter)
            self._help[setting_id] = help_text

    def button(self, btn: ButtonID) -> ButtonVariable:
        return self.buttons[btn]

    def setting(self, setting_id: SettingID) -> SettingVariable:
        return self.settings[setting_id]

    def reset(self):
        for var in self.buttons.values():
            var.reset()
        for var in self.settings.values():
            var.reset()

    def build_registry(self) -> CommandRegistry:
        registry = CommandRegistry(self.log)
        for btn, var in self.buttons.items():
            registry.add(AssignmentCommand(btn.name, var, log=self.log).set_help(BUTTON_HELP))
        for setting_id, var in self.settings.items():
            if setting_id in GYRO_SENS_PAIR:
                continue
            registry.add(
                AssignmentCommand(setting_id.name, var, log=self.log)
                .set_help(self._help[setting_id])
            )

        # GYRO_SENS sets both ends of the gyro curve at once
        for setting_id in GYRO_SENS_PAIR:
            registry.add(
                AssignmentCommand("GYRO_SENS", self.settings[setting_id], setting_id.name, log=self.log)
                .set_help("Sets MIN_GYRO_SENS and MAX_GYRO_SENS together.")
            )

        registry.add(
            Command("RESET_MAPPINGS", self.log)
            .set_parser(self._reset_parser)
            .set_help("RESET_MAPPINGS puts every setting and mapping back to its default.")
        )
        if self.log:
            self.log.info(f"[PROFILE] {len(registry.names())} commands registered")
        return registry

    def _reset_parser(self, command: Command, arguments: str) -> bool:
        if arguments == "HELP":
            print(command.help)
            return False
        if arguments:
            return False
        self.reset()
        print("All settings and mappings have been reset.")
        return True
