"""Building blocks for a small interactive POSIX shell."""

__version__ = "0.1.0"

__all__ = [
    "alias",
    "cd",
    "exit_command",
    "history",
    "path",
    "pipeline",
    "redirection",
    "signals",
]