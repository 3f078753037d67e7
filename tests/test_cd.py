import os

import pytest

from minishell.cd import CdError, change_directory


def test_changes_directory_and_pwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PWD", str(tmp_path))
    sub = tmp_path / "sub"
    sub.mkdir()
    result = change_directory(str(sub))
    assert result == os.getcwd()
    assert os.path.samefile(result, sub)
    assert os.environ["PWD"] == result


@pytest.mark.parametrize("path", [None, ""])
def test_missing_argument(path):
    with pytest.raises(CdError, match="missing argument"):
        change_directory(path)


def test_nonexistent_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(CdError, match="cd failed"):
        change_directory(str(tmp_path / "missing"))
    assert os.path.samefile(os.getcwd(), tmp_path)