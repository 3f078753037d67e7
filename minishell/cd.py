"""The ``cd`` builtin."""

from __future__ import annotations

import os


class CdError(Exception):
    """Raised when the working directory cannot be changed."""


def change_directory(path: str | None) -> str:
    """Change the working directory, update ``PWD`` and return the new directory."""
    if not path:
        raise CdError("cd: missing argument")
    try:
        os.chdir(path)
    except OSError as exc:
        raise CdError(f"cd failed: {exc.strerror}") from exc
    try:
        cwd = os.getcwd()
    except OSError as exc:
        raise CdError(f"getcwd failed: {exc.strerror}") from exc
    os.environ["PWD"] = cwd
    return cwd