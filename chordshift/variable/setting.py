#!/usr/bin/env python3
"""
setting.py - Settings with per-chord overrides ("modeshifts")

While a chord button is held, the modeshift registered for it replaces the
setting's own value. Removing a modeshift is a two step affair: the parser
marks it, and the command owning it processes the removal when it is
disposed, so no entry disappears in the middle of a parse.
"""

from typing import Iterable, Optional

from chordshift.values.types import ButtonID, SettingID
from chordshift.variable.variable import Filter, Variable


class SettingVariable(Variable):
    def __init__(self, setting_id: SettingID, default, value_filter: Optional[Filter] = None):
        super().__init__(default, value_filter)
        self.setting_id = setting_id
        self._chorded: dict[ButtonID, Variable] = {}
        self._pending_removal: set[ButtonID] = set()

    @property
    def chords(self) -> tuple[ButtonID, ...]:
        return tuple(self._chorded)

    def has_modeshift(self, chord: ButtonID) -> bool:
        return chord in self._chorded

    def at_chord(self, chord: ButtonID) -> Variable:
        """Modeshift variable for chord, created from the current value on first use.

        A freshly created modeshift stays marked for removal until
        keep_modeshift() is called, so looking one up without assigning it
        leaves nothing behind once the removal is processed.
        """
        var = self._chorded.get(chord)
        if var is None:
            var = Variable(self.get(), self._filter)
            self._chorded[chord] = var
            self._pending_removal.add(chord)
        else:
            self._pending_removal.discard(chord)
        return var

    def keep_modeshift(self, chord: ButtonID):
        self._pending_removal.discard(chord)

    def mark_modeshift_for_removal(self, chord: ButtonID):
        if chord in self._chorded:
            self._pending_removal.add(chord)

    def process_modeshift_removal(self, chord: ButtonID) -> bool:
        if chord not in self._pending_removal:
            return False
        self._pending_removal.discard(chord)
        del self._chorded[chord]
        return True

    def value(self, active_chords: Iterable[ButtonID] = ()):
        """Value in effect; the most recently pressed chord with a modeshift wins."""
        for chord in reversed(list(active_chords)):
            var = self._chorded.get(chord)
            if var is not None:
                return var.get()
        return self.get()

    def reset(self):
        self._chorded.clear()
        self._pending_removal.clear()
        return super().reset()
