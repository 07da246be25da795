#!/usr/bin/env python3
"""
button.py - Button bindings with chorded and simultaneous-press variants

    A = SPACE        base mapping
    R,A = E          A while R is held (chord)
    L+A = Q          L and A pressed together (sim-press)

Chord and sim-press entries are dropped once they map to no input, when the
command that edited them processes the removal.
"""

from typing import Iterable

from chordshift.values.mapping import EventMapping
from chordshift.values.types import ButtonID
from chordshift.variable.variable import Variable


class ButtonVariable(Variable):
    def __init__(self, button_id: ButtonID, default: EventMapping = EventMapping()):
        super().__init__(default)
        self.button_id = button_id
        self._chorded: dict[ButtonID, Variable] = {}
        self._sim_press: dict[ButtonID, Variable] = {}

    def has_chord(self, chord: ButtonID) -> bool:
        return chord in self._chorded

    def has_sim_press(self, partner: ButtonID) -> bool:
        return partner in self._sim_press

    def at_chord(self, chord: ButtonID) -> Variable:
        var = self._chorded.get(chord)
        if var is None:
            var = self._chorded[chord] = Variable(EventMapping())
        return var

    def at_sim_press(self, partner: ButtonID) -> Variable:
        var = self._sim_press.get(partner)
        if var is None:
            var = self._sim_press[partner] = Variable(EventMapping())
        return var

    def process_chord_removal(self, chord: ButtonID) -> bool:
        return self._drop_if_unmapped(self._chorded, chord)

    def process_sim_press_removal(self, partner: ButtonID) -> bool:
        return self._drop_if_unmapped(self._sim_press, partner)

    @staticmethod
    def _drop_if_unmapped(children: dict, button: ButtonID) -> bool:
        var = children.get(button)
        if var is None or not var.get().is_empty():
            return False
        del children[button]
        return True

    def mapping(self, active_chords: Iterable[ButtonID] = ()) -> EventMapping:
        """Mapping in effect; the most recently pressed chord with a binding wins."""
        for chord in reversed(list(active_chords)):
            var = self._chorded.get(chord)
            if var is not None:
                return var.get()
        return self.get()

    def reset(self):
        self._chorded.clear()
        self._sim_press.clear()
        return super().reset()
