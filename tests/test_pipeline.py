from minishell.pipeline import MAX_ARGS, execute_pipeline, split_pipeline


def test_split_simple():
    assert split_pipeline("ls -l | grep foo\n") == [["ls", "-l"], ["grep", "foo"]]


def test_split_skips_empty_segments():
    assert split_pipeline("ls || wc") == [["ls"], ["wc"]]


def test_split_limits_commands():
    assert split_pipeline("a | b | c | d") == [["a"], ["b"], ["c"]]


def test_split_limits_arguments():
    words = [f"w{i}" for i in range(MAX_ARGS + 5)]
    result = split_pipeline(" ".join(words))
    assert result == [words[: MAX_ARGS - 1]]


def test_execute_connects_commands(capfd):
    codes = execute_pipeline("echo hello | tr a-z A-Z")
    out = capfd.readouterr().out
    assert codes == [0, 0]
    assert out == "HELLO\n"


def test_execute_three_stages(capfd):
    codes = execute_pipeline("printf abc | cat | cat | cat")
    assert codes == [0, 0, 0]
    assert capfd.readouterr().out == "abc"


def test_execute_missing_program(capfd):
    codes = execute_pipeline("no-such-program-for-minishell-tests")
    captured = capfd.readouterr()
    assert codes == [1]
    assert "exec failed" in captured.err


def test_execute_missing_program_downstream_sees_eof(capfd):
    codes = execute_pipeline("no-such-program-for-minishell-tests | cat")
    captured = capfd.readouterr()
    assert codes == [1, 0]
    assert captured.out == ""