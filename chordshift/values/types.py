#!/usr/bin/env python3
"""
types.py - Identifiers and small value types of a controller profile
"""

from enum import Enum, IntEnum
from typing import NamedTuple, Optional


class ButtonID(IntEnum):
    # Sentinels sit below every physical button
    INVALID = -2
    NONE = -1
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    L = 4
    ZL = 5
    MINUS = 6
    CAPTURE = 7
    E = 8
    S = 9
    N = 10
    W = 11
    R = 12
    ZR = 13
    PLUS = 14
    HOME = 15
    SL = 16
    SR = 17
    L3 = 18
    R3 = 19
    LUP = 20
    LDOWN = 21
    LLEFT = 22
    LRIGHT = 23
    LRING = 24
    RUP = 25
    RDOWN = 26
    RLEFT = 27
    RRIGHT = 28
    RRING = 29
    ZLF = 30
    ZRF = 31
    TOUCH = 32

    @classmethod
    def from_token(cls, token: str) -> Optional["ButtonID"]:
        """Look a button up by name. None for unknown tokens."""
        return cls.__members__.get(token.strip().upper())

    def is_physical(self) -> bool:
        return self > ButtonID.NONE


class SettingID(Enum):
    MIN_GYRO_SENS = "min_gyro_sens"
    MAX_GYRO_SENS = "max_gyro_sens"
    MIN_GYRO_THRESHOLD = "min_gyro_threshold"
    MAX_GYRO_THRESHOLD = "max_gyro_threshold"
    GYRO_SMOOTH_THRESHOLD = "gyro_smooth_threshold"
    STICK_SENS = "stick_sens"
    STICK_POWER = "stick_power"
    STICK_DEADZONE_INNER = "stick_deadzone_inner"
    STICK_DEADZONE_OUTER = "stick_deadzone_outer"
    LEFT_STICK_MODE = "left_stick_mode"
    RIGHT_STICK_MODE = "right_stick_mode"
    MOUSE_RING_RADIUS = "mouse_ring_radius"
    TRIGGER_THRESHOLD = "trigger_threshold"
    ZL_MODE = "zl_mode"
    ZR_MODE = "zr_mode"
    HOLD_PRESS_TIME = "hold_press_time"
    RUMBLE = "rumble"


class StickMode(Enum):
    NO_MOUSE = 0
    AIM = 1
    FLICK = 2
    FLICK_ONLY = 3
    ROTATE_ONLY = 4
    MOUSE_RING = 5
    MOUSE_AREA = 6
    OUTER_RING = 7
    INNER_RING = 8


class TriggerMode(Enum):
    NO_FULL = 0
    NO_SKIP = 1
    MAY_SKIP = 2
    MUST_SKIP = 3
    MAY_SKIP_R = 4
    MUST_SKIP_R = 5
    NO_SKIP_EXCLUSIVE = 6


class FloatXY(NamedTuple):
    """Per-axis pair, written as "x y" or a single "v" for both axes."""
    x: float
    y: float

    @classmethod
    def from_text(cls, text: str) -> "FloatXY":
        parts = text.split()
        if len(parts) == 1:
            value = float(parts[0])
            return cls(value, value)
        if len(parts) == 2:
            return cls(float(parts[0]), float(parts[1]))
        raise ValueError(f"Expected one or two numbers, got '{text}'")

    def __str__(self) -> str:
        return f"{self.x} {self.y}"
