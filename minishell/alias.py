"""Shell aliases: definition, removal, listing and substitution."""

from __future__ import annotations

import re
import sys
from typing import TextIO

MAX_ALIASES = 50

_FIRST_WORD = re.compile(r"[ \t\n]*([^ \t\n]+)")


class AliasError(Exception):
    """Raised for malformed alias commands or unknown aliases."""


class AliasTable:
    """An ordered table of at most ``MAX_ALIASES`` aliases."""

    def __init__(self) -> None:
        self._aliases: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._aliases)

    def __contains__(self, name: object) -> bool:
        return name in self._aliases

    def define(self, name: str, command: str) -> None:
        """Define or replace an alias; new ones are ignored once the table is full."""
        if name in self._aliases or len(self._aliases) < MAX_ALIASES:
            self._aliases[name] = command

    def remove(self, name: str) -> None:
        """Remove an alias by name."""
        if name not in self._aliases:
            raise AliasError("alias: alias not found")
        self._aliases.pop(name)

    def clear(self) -> None:
        """Remove every alias."""
        self._aliases.clear()

    def listing(self) -> list[str]:
        """Return one ``alias name='command'`` line per alias, in order."""
        return [f"alias {name}='{command}'" for name, command in self._aliases.items()]

    def handle(self, args: list[str], out: TextIO | None = None) -> None:
        """Run the ``alias`` builtin with ``args`` (``args[0]`` is the command name)."""
        out = out if out is not None else sys.stdout
        argc = len(args)
        if argc == 1:
            for line in self.listing():
                out.write(line + "\n")
        elif argc == 2 and args[1] == "-c":
            self.clear()
        elif argc == 3 and args[1] == "-r":
            self.remove(args[2])
        elif argc == 2:
            name, command = self._parse_definition(args[1])
            self.define(name, command)
        else:
            raise AliasError("alias: invalid arguments")

    @staticmethod
    def _parse_definition(text: str) -> tuple[str, str]:
        name, sep, rest = text.partition("=")
        if not sep or not name or not rest.startswith("'") or len(rest) < 2:
            raise AliasError("alias: invalid format")
        return name, rest[1:-1]

    def substitute(self, line: str) -> str:
        """Replace the line's first word with its alias, if it has one."""
        match = _FIRST_WORD.match(line)
        if match is None:
            return line
        command = self._aliases.get(match.group(1))
        if command is None:
            return line
        return command + line[match.end():]