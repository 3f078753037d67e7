"""Input and output redirection for simple commands."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

_OUTPUT_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_OUTPUT_MODE = 0o644


class RedirectionError(Exception):
    """Raised when a redirection is malformed or cannot be set up."""


@dataclass
class Redirection:
    """A command's arguments together with its redirection targets."""

    args: list[str] = field(default_factory=list)
    input_file: str | None = None
    output_file: str | None = None

    def open_input(self) -> int:
        """Open the input file read-only and return its descriptor."""
        if self.input_file is None:
            raise RedirectionError("no input file specified")
        try:
            return os.open(self.input_file, os.O_RDONLY)
        except OSError as exc:
            raise RedirectionError(f"open input file: {exc.strerror}") from exc

    def open_output(self) -> int:
        """Create or truncate the output file and return its descriptor."""
        if self.output_file is None:
            raise RedirectionError("no output file specified")
        try:
            return os.open(self.output_file, _OUTPUT_FLAGS, _OUTPUT_MODE)
        except OSError as exc:
            raise RedirectionError(f"open output file: {exc.strerror}") from exc

    def apply(self) -> None:
        """Point standard input and output of this process at the targets."""
        if self.input_file is not None:
            fd = self.open_input()
            try:
                os.dup2(fd, sys.__stdin__.fileno() if sys.__stdin__ else 0)
            except OSError as exc:
                raise RedirectionError(f"dup2 stdin: {exc.strerror}") from exc
            finally:
                os.close(fd)

        if self.output_file is not None:
            fd = self.open_output()
            if sys.stdout is not None:
                sys.stdout.flush()
            try:
                os.dup2(fd, 1)
            except OSError as exc:
                raise RedirectionError(f"dup2 stdout: {exc.strerror}") from exc
            finally:
                os.close(fd)


def parse_redirection(args: list[str]) -> Redirection:
    """Split ``<`` and ``>`` operators out of an argument list.

    The command's arguments end at the first operator; a later operator of
    the same kind replaces an earlier one.
    """
    command: list[str] = []
    input_file: str | None = None
    output_file: str | None = None
    seen_operator = False

    tokens = iter(args)
    for token in tokens:
        if token == "<":
            target = next(tokens, None)
            if target is None:
                raise RedirectionError("syntax error: no input file specified")
            input_file = target
            seen_operator = True
        elif token == ">":
            target = next(tokens, None)
            if target is None:
                raise RedirectionError("syntax error: no output file specified")
            output_file = target
            seen_operator = True
        elif not seen_operator:
            command.append(token)

    return Redirection(command, input_file, output_file)