"""The ``myhistory`` builtin: a bounded list of recent commands."""

from __future__ import annotations

import re
import sys
from collections import deque
from typing import Callable, TextIO

MAX_HISTORY = 20

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class HistoryError(Exception):
    """Raised for bad history arguments or indexes."""


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class History:
    """The last ``MAX_HISTORY`` commands, oldest first."""

    def __init__(self) -> None:
        self._entries: deque[str] = deque(maxlen=MAX_HISTORY)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, command: str) -> None:
        """Record a command, dropping the oldest when full."""
        self._entries.append(command)

    def entries(self) -> list[str]:
        """Return the recorded commands, oldest first."""
        return list(self._entries)

    def clear(self) -> None:
        """Forget every command."""
        self._entries.clear()

    def get(self, index: int) -> str:
        """Return the command at ``index`` (0 is the oldest)."""
        if index < 0 or index >= len(self._entries):
            raise HistoryError("myhistory: invalid history number")
        return self._entries[index]

    def handle(
        self,
        args: list[str],
        execute: Callable[[str], object],
        out: TextIO | None = None,
    ) -> None:
        """Run the ``myhistory`` builtin; ``-e N`` passes entry N to ``execute``."""
        out = out if out is not None else sys.stdout
        argc = len(args)
        if argc == 1:
            for number, command in enumerate(self._entries):
                out.write(f"{number}  {command}\n")
        elif argc == 2 and args[1] == "-c":
            self.clear()
        elif argc == 3 and args[1] == "-e":
            command = self.get(_atoi(args[2]))
            out.write(f"Executing: {command}\n")
            execute(command)
        else:
            raise HistoryError("myhistory: invalid arguments")