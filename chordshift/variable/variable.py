#!/usr/bin/env python3
"""
variable.py - Observable configuration values

A Variable holds one live value. Setting it runs the optional filter
(current, requested) -> stored, and listeners are only notified when the
stored value actually changes.
"""

import itertools
from typing import Any, Callable, Optional

Listener = Callable[[Any], None]
Filter = Callable[[Any, Any], Any]


class Subscription:
    """Handle for one registered listener. release() is safe to call twice."""

    def __init__(self, variable: "Variable", listener_id: int):
        self._variable = variable
        self.listener_id = listener_id

    @property
    def active(self) -> bool:
        return self._variable is not None

    def release(self) -> bool:
        if self._variable is None:
            return False
        removed = self._variable.remove_change_listener(self.listener_id)
        self._variable = None
        return removed


class Variable:
    def __init__(self, default, value_filter: Optional[Filter] = None):
        self._default = default
        self._value = default
        self._filter = value_filter
        self._listeners: dict[int, Listener] = {}
        self._ids = itertools.count(1)

    @property
    def default(self):
        return self._default

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def get(self):
        return self._value

    def set(self, value):
        """Filter and store value. Returns what was actually stored."""
        stored = self._filter(self._value, value) if self._filter else value
        self._store(stored)
        return self._value

    def reset(self):
        """Go back to the default value, bypassing the filter."""
        self._store(self._default)
        return self._value

    def set_filter(self, value_filter: Optional[Filter]) -> "Variable":
        self._filter = value_filter
        return self

    def _store(self, value):
        if value == self._value:
            return
        self._value = value
        # listeners may unsubscribe while being notified
        for listener in list(self._listeners.values()):
            listener(value)

    # ---------------------------------------------------------------
    # Change listeners
    # ---------------------------------------------------------------
    def add_change_listener(self, listener: Listener) -> int:
        listener_id = next(self._ids)
        self._listeners[listener_id] = listener
        return listener_id

    def remove_change_listener(self, listener_id: int) -> bool:
        return self._listeners.pop(listener_id, None) is not None

    def subscribe(self, listener: Listener) -> Subscription:
        return Subscription(self, self.add_change_listener(listener))
