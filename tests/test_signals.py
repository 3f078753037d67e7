import multiprocessing
import os
import signal
import subprocess
import sys

from minishell.signals import JobControl

_CHILD_SCRIPT = """
import os, sys, time
fd = int(sys.argv[1])
time.sleep(0.3)
os.write(fd, b"1" if os.getpgrp() == os.getpid() else b"0")
sys.exit(7)
"""


def _check_setup_shell(jc, read_fd, write_fd):
    os.close(read_fd)
    jc.setup_shell()
    ok = (
        signal.getsignal(signal.SIGINT) == signal.SIG_IGN
        and signal.getsignal(signal.SIGTSTP) == signal.SIG_IGN
        and os.getpgrp() == os.getpid()
        and jc.shell_pgid == os.getpid()
        and jc.shell_modes is None
    )
    os.write(write_fd, b"1" if ok else b"0")


def test_setup_shell_in_child():
    read_fd, write_fd = os.pipe()
    jc = JobControl(stdin_fd=write_fd)
    ctx = multiprocessing.get_context("fork")
    proc = ctx.Process(target=_check_setup_shell, args=(jc, read_fd, write_fd))
    proc.start()
    os.close(write_fd)
    result = os.read(read_fd, 10)
    os.close(read_fd)
    proc.join()
    assert proc.exitcode == 0
    assert result == b"1"