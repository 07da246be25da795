#!/usr/bin/env python3
"""
codec.py - Text codecs for values bound to assignment commands

Every value type used with an AssignmentCommand needs three things:
- encode: value -> text (what the console shows)
- decode: text -> value, raising ValueError when the text is not a value
- equals: value equality

codec_for() picks one from the value's type:
    bool, float, int, any Enum (by member name), or any type with a
    from_text() classmethod and a __str__ (EventMapping, FloatXY, ...)
"""

import math
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable


@dataclass(frozen=True)
class Codec:
    encode: Callable[[Any], str]
    decode: Callable[[str], Any]
    equals: Callable[[Any, Any], bool] = operator.eq


# ---------------------------------------------------------------
# Base types
# ---------------------------------------------------------------
_TRUE_WORDS = ("ON", "TRUE", "YES", "1")
_FALSE_WORDS = ("OFF", "FALSE", "NO", "0")


def _decode_bool(text: str) -> bool:
    word = text.strip().upper()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"Not a switch value: '{text}'")


def _encode_bool(value: bool) -> str:
    return "ON" if value else "OFF"


def _decode_float(text: str) -> float:
    value = float(text)
    # nan never equals itself, inf is never a useful setting
    if not math.isfinite(value):
        raise ValueError(f"Not a finite number: '{text}'")
    return value


def _decode_int(text: str) -> int:
    return int(text.strip(), 10)


BOOL_CODEC = Codec(_encode_bool, _decode_bool)
FLOAT_CODEC = Codec(str, _decode_float)
INT_CODEC = Codec(str, _decode_int)


def enum_codec(enum_type) -> Codec:
    """Codec reading and writing enum members by name, case-insensitive."""

    def decode(text: str):
        try:
            return enum_type[text.strip().upper()]
        except KeyError:
            raise ValueError(f"'{text}' is not a valid {enum_type.__name__}") from None

    return Codec(lambda member: member.name, decode)


def codec_for(value_type: type) -> Codec:
    # bool before int: bool is an int subclass
    if issubclass(value_type, bool):
        return BOOL_CODEC
    if issubclass(value_type, Enum):
        return enum_codec(value_type)
    if issubclass(value_type, float):
        return FLOAT_CODEC
    if issubclass(value_type, int):
        return INT_CODEC
    from_text = getattr(value_type, "from_text", None)
    if callable(from_text):
        return Codec(str, from_text)
    raise TypeError(f"No text codec for values of type {value_type.__name__}")
