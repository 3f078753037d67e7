"""Terminal job control for the shell and its foreground children."""

from __future__ import annotations

import os
import signal
import termios


class JobControl:
    """Keeps the shell in its own process group and hands the terminal to children."""

    def __init__(self, stdin_fd: int = 0) -> None:
        self.stdin_fd = stdin_fd
        self.shell_pgid: int | None = None
        self.shell_modes: list | None = None

    def _give_terminal(self, pgid: int) -> None:
        try:
            os.tcsetpgrp(self.stdin_fd, pgid)
        except OSError:
            pass

    def setup_shell(self) -> None:
        """Ignore Ctrl+C and Ctrl+Z and make the shell its own foreground group."""
        signal.signal(signal.SIGINT, signal.SIG_IGN)
        signal.signal(signal.SIGTSTP, signal.SIG_IGN)

        self.shell_pgid = os.getpid()
        try:
            self.shell_modes = termios.tcgetattr(self.stdin_fd)
        except termios.error:
            self.shell_modes = None

        if os.getpgid(0) != self.shell_pgid:
            os.setpgid(self.shell_pgid, self.shell_pgid)
        self._give_terminal(self.shell_pgid)

    def wait_in_foreground(self, child_pid: int) -> int:
        """Run a child in its own foreground group, wait for it, return its exit code."""
        os.setpgid(child_pid, child_pid)
        self._give_terminal(child_pid)
        try:
            _, status = os.waitpid(child_pid, 0)
        finally:
            self._give_terminal(
                self.shell_pgid if self.shell_pgid is not None else os.getpgrp()
            )
        return os.waitstatus_to_exitcode(status)