"""Detection of the ``exit`` command in an input line."""


def should_exit(line: str) -> bool:
    """Return True if any ``;``-separated command in ``line`` is ``exit``."""
    for part in line.split(";"):
        cmd = part.lstrip(" \t").rstrip(" \t\n")
        if cmd.startswith("exit") and cmd[4:5] in ("", " ", "\n"):
            return True
    return False