#!/usr/bin/env python3
"""
mapping.py - What a controller button produces

Mapping syntax (one button):
    NONE            -> no input
    X               -> X is held while the button is held
    ^X              -> X toggles on each press
    X Y             -> tap X, hold Y
Key names may be combined with '+': "Ctrl+Shift+F5", "ALT+TAB".
"""

from dataclasses import dataclass
from typing import Literal

# ---------------------------------------------------------------
# Key names understood by the mapper, with their virtual-key codes
# ---------------------------------------------------------------
NAMED_KEYS = {
    "CTRL": 0x11,
    "CONTROL": 0x11,
    "ALT": 0x12,
    "SHIFT": 0x10,
    "WIN": 0x5B,
    "LWIN": 0x5B,
    "RWIN": 0x5C,
    "CAPS": 0x14,

    "ENTER": 0x0D,
    "RETURN": 0x0D,
    "ESC": 0x1B,
    "ESCAPE": 0x1B,
    "SPACE": 0x20,
    "TAB": 0x09,
    "BACKSPACE": 0x08,
    "DEL": 0x2E,
    "DELETE": 0x2E,
    "INSERT": 0x2D,
    "HOME": 0x24,
    "END": 0x23,
    "PAGEUP": 0x21,
    "PAGEDOWN": 0x22,
    "LEFT": 0x25,
    "RIGHT": 0x27,
    "UP": 0x26,
    "DOWN": 0x28,

    "LMOUSE": 0x01,
    "RMOUSE": 0x02,
    "MMOUSE": 0x04,
    "BMOUSE": 0x05,
    "FMOUSE": 0x06,
}


def key_code(name: str) -> int:
    """Map 'A', 'F1', 'Ctrl', 'LMOUSE' to a virtual-key code, 0 if unknown."""
    k = name.upper()

    # single letters A-Z and digits 0-9 share their ASCII code
    if len(k) == 1 and ("A" <= k <= "Z" or "0" <= k <= "9"):
        return ord(k)

    # function keys F1-F24
    if k.startswith("F") and k[1:].isdigit():
        n = int(k[1:])
        if 1 <= n <= 24:
            return 0x70 + (n - 1)

    return NAMED_KEYS.get(k, 0)


# ---------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------
@dataclass(frozen=True)
class KeyAction:
    keys: tuple[str, ...]
    mode: Literal["press", "tap", "hold", "toggle"] = "press"

    @property
    def combo(self) -> str:
        return "+".join(self.keys)

    def __str__(self) -> str:
        return f"^{self.combo}" if self.mode == "toggle" else self.combo


@dataclass(frozen=True)
class EventMapping:
    actions: tuple[KeyAction, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> "EventMapping":
        tokens = text.split()
        if tokens == ["NONE"]:
            return cls()
        if len(tokens) == 1:
            token = tokens[0]
            if token.startswith("^"):
                return cls((parse_action(token[1:], "toggle"),))
            return cls((parse_action(token, "press"),))
        if len(tokens) == 2:
            return cls((parse_action(tokens[0], "tap"), parse_action(tokens[1], "hold")))
        raise ValueError(f"Expected one or two actions, got '{text}'")

    def is_empty(self) -> bool:
        return not self.actions

    @property
    def representation(self) -> str:
        if not self.actions:
            return "NONE"
        parts = []
        for action in self.actions:
            if action.mode == "press":
                parts.append(action.combo)
            elif action.mode == "toggle":
                parts.append(f"toggle {action.combo}")
            else:
                parts.append(f"{action.combo} on {action.mode}")
        return ", ".join(parts)

    def __str__(self) -> str:
        if not self.actions:
            return "NONE"
        return " ".join(str(a) for a in self.actions)


def parse_action(token: str, mode: str) -> KeyAction:
    parts = [p.strip().upper() for p in token.split("+")]
    if not parts or any(not p for p in parts):
        raise ValueError(f"Malformed key combo: '{token}'")
    for p in parts:
        if key_code(p) == 0:
            raise ValueError(f"Unknown key: '{p}'")
    return KeyAction(tuple(parts), mode)
