"""Running commands connected by ``|``."""

from __future__ import annotations

import re
import subprocess
import sys

MAX_COMMANDS = 3
MAX_ARGS = 20

_SEPARATORS = re.compile(r"[ \t\n]+")


def split_pipeline(line: str) -> list[list[str]]:
    """Split a line into at most ``MAX_COMMANDS`` argument lists.

    Empty segments between ``|`` are skipped; each command keeps at most
    ``MAX_ARGS - 1`` arguments.
    """
    segments = [segment for segment in line.split("|") if segment][:MAX_COMMANDS]
    return [
        [token for token in _SEPARATORS.split(segment) if token][: MAX_ARGS - 1]
        for segment in segments
    ]


def execute_pipeline(line: str) -> list[int]:
    """Run the pipeline and return each command's exit status, in order."""
    commands = split_pipeline(line)
    processes: list[subprocess.Popen | None] = []
    upstream = None

    for position, argv in enumerate(commands):
        last = position == len(commands) - 1
        process = None
        try:
            if not argv:
                raise OSError("empty command")
            process = subprocess.Popen(
                argv, stdin=upstream, stdout=None if last else subprocess.PIPE
            )
        except OSError as exc:
            sys.stderr.write(f"exec failed: {exc.strerror or exc}\n")
            sys.stderr.flush()
        finally:
            if upstream not in (None, subprocess.DEVNULL):
                upstream.close()

        processes.append(process)
        if not last:
            upstream = process.stdout if process is not None else subprocess.DEVNULL

    return [1 if process is None else process.wait() for process in processes]