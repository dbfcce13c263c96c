"""
- Provide a scripted console: a read_line that replays given lines (then
  raises EOFError like input() does at end of stdin) and a write that collects
  everything printed.
"""
from typing import Callable, Iterable, List

import pytest


class ScriptedConsole:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.reads = 0
        self.output: List[str] = []

    def read_line(self) -> str:
        if self.reads >= len(self._lines):
            raise EOFError
        line = self._lines[self.reads]
        self.reads += 1
        return line

    def write(self, text: str) -> None:
        # print() may emit several lines at once; keep one entry per line
        self.output.extend(text.split("\n"))


@pytest.fixture
def console() -> Callable[[Iterable[str]], ScriptedConsole]:
    def _make(lines: Iterable[str]) -> ScriptedConsole:
        return ScriptedConsole(lines)
    return _make
