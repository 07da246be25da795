#!/usr/bin/env python3
"""
base.py - Named console command with a pluggable parse strategy

A parse strategy is any callable (command, arguments) -> bool. True means the
arguments were understood by this command.
"""

from typing import Callable, Optional

Parser = Callable[["Command", str], bool]


class Command:
    def __init__(self, name: str, log=None):
        self.name = name
        self.help = ""
        self.log = log
        self._parse: Optional[Parser] = None
        self._task_on_destruction: Optional[Callable[[], object]] = None
        self._closed = False

    # ---------------------------------------------------------------
    # Fluent setup
    # ---------------------------------------------------------------
    def set_help(self, help_text: str) -> "Command":
        self.help = help_text
        return self

    def set_parser(self, parser: Optional[Parser]) -> "Command":
        self._parse = parser
        return self

    def set_task_on_destruction(self, task: Optional[Callable[[], object]]) -> "Command":
        self._task_on_destruction = task
        return self

    @property
    def parser(self) -> Optional[Parser]:
        return self._parse

    @property
    def closed(self) -> bool:
        return self._closed

    # ---------------------------------------------------------------
    # Behaviour
    # ---------------------------------------------------------------
    def parse_data(self, arguments: str) -> bool:
        if self._parse is None:
            raise RuntimeError(f"There is no function defined to parse {self.name}.")
        return self._parse(self, arguments)

    def get_modified_cmd(self, op: str, chord: str) -> Optional["Command"]:
        """Command scoped by '<chord><op>'. The base command supports no modifier."""
        if self.log:
            self.log.debug(f"[MODIFIER] {chord}{op}{self.name} has no scoped variant")
        return None

    def close(self):
        """Run the destruction task, then release what the command holds."""
        if self._closed:
            return
        self._closed = True
        if self._task_on_destruction is not None:
            self._task_on_destruction()
        self._release()

    def _release(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
