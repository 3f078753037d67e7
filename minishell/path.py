"""The ``path`` builtin: the shell's own list of search directories."""

from __future__ import annotations

import re
import sys
from typing import Iterator, TextIO

MAX_PATHS = 100

_SEPARATORS = re.compile(r"[ \t\n]+")


class PathError(Exception):
    """Raised for malformed ``path`` commands."""


class PathList:
    """An ordered list of at most ``MAX_PATHS`` directories."""

    def __init__(self) -> None:
        self._paths: list[str] = []

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def add(self, path: str) -> None:
        """Append a directory; ignored once the list is full."""
        if len(self._paths) < MAX_PATHS:
            self._paths.append(path)

    def remove(self, path: str) -> None:
        """Remove the first occurrence of a directory, if present."""
        if path in self._paths:
            self._paths.remove(path)

    def clear(self) -> None:
        """Remove every directory."""
        self._paths.clear()

    def format(self) -> str:
        """Return the directories joined by ``:``."""
        return ":".join(self._paths)

    def handle_command(self, line: str, out: TextIO | None = None) -> None:
        """Run a ``path``, ``path + DIR`` or ``path - DIR`` command line."""
        out = out if out is not None else sys.stdout
        tokens = [token for token in _SEPARATORS.split(line) if token]
        if not tokens:
            return
        if len(tokens) == 1:
            out.write(self.format() + "\n")
            return

        op, operand = tokens[1], tokens[2] if len(tokens) > 2 else None
        if op == "+":
            if operand is None:
                raise PathError("path + requires a pathname")
            self.add(operand)
        elif op == "-":
            if operand is None:
                raise PathError("path - requires a pathname")
            self.remove(operand)
        else:
            raise PathError("Invalid path command format")