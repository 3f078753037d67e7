import pytest

from minishell.exit_command import should_exit


@pytest.mark.parametrize(
    "line",
    ["exit", "exit\n", "  exit  ", "ls; exit", "exit; ls", "exit 3", "\texit\t", "ls ;exit;"],
)
def test_exit_detected(line):
    assert should_exit(line) is True


@pytest.mark.parametrize(
    "line", ["", "ls", "exitfoo", "echo exit", "exit\tnow", "ls; echo done"]
)
def test_exit_not_detected(line):
    assert should_exit(line) is False