import io
import os
from pathlib import Path

import pytest

from minish.builtins import (
    ShellExit,
    change_directory,
    echo_output,
    is_builtin,
    run_builtin,
    working_directory,
)
from minish.environment import Environment


@pytest.fixture
def env():
    return Environment.from_entries(["HOME=/home/user", "SHELL=/bin/sh"])


@pytest.mark.parametrize(
    "line, expected",
    [
        ("echo hello world", "hello world\n"),
        ("echo -n hello", "hello"),
        ("echo 'a   b'", "a   b\n"),
        ('echo "quoted"', "quoted\n"),
        ("echo a    b", "a b\n"),
        ("echo hi -n", "hi -n\n"),
    ],
)
def test_echo_output(line, expected):
    assert echo_output(line) == expected


def test_echo_without_arguments_prints_newline():
    assert echo_output("echo") == "\n"


def test_echo_output_without_echo_is_empty():
    assert echo_output("ls -l") == ""


def test_echo_trailing_spaces_dropped():
    assert echo_output("echo word   ") == "word\n"


def test_is_builtin():
    for name in ["cd", "pwd", "exit", "export", "env", "unset", "echo"]:
        assert is_builtin(name)
    assert not is_builtin("ls")


def test_change_directory_sets_pwd(tmp_path, monkeypatch, env):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "sub"
    target.mkdir()
    result = change_directory(str(target), env)
    assert Path(result).resolve() == target.resolve()
    assert env.get("PWD") == result


def test_change_directory_missing_raises(tmp_path, monkeypatch, env):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(OSError):
        change_directory(str(tmp_path / "absent"), env)
    assert env.get("PWD") is None


def test_change_directory_none_raises(env):
    with pytest.raises(OSError):
        change_directory(None, env)


def test_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert Path(working_directory()).resolve() == tmp_path.resolve()


def test_run_builtin_unknown_returns_false(env):
    out = io.StringIO()
    assert run_builtin(["ls", "-l"], "ls -l", env, out) is False
    assert out.getvalue() == ""


def test_run_builtin_empty_args(env):
    assert run_builtin([], "", env, io.StringIO()) is False


def test_run_builtin_exit(env):
    with pytest.raises(ShellExit) as info:
        run_builtin(["exit"], "exit", env, io.StringIO())
    assert info.value.status == 0


def test_run_builtin_env(env):
    out = io.StringIO()
    assert run_builtin(["env"], "env", env, out)
    assert out.getvalue().splitlines() == env.env_lines()


def test_run_builtin_export_lists_sorted(env):
    out = io.StringIO()
    run_builtin(["export"], "export", env, out)
    assert out.getvalue().splitlines() == [
        'declare -x HOME="/home/user"',
        'declare -x SHELL="/bin/sh"',
    ]


def test_run_builtin_export_sets_variable(env):
    out = io.StringIO()
    run_builtin(["export", "COLOR=blue"], "export COLOR=blue", env, out)
    assert env.get("COLOR") == "blue"
    assert out.getvalue() == ""


def test_run_builtin_export_without_value(env):
    run_builtin(["export", "FLAG"], "export FLAG", env, io.StringIO())
    assert env.get("FLAG") == "''"


def test_run_builtin_unset(env):
    run_builtin(["unset", "HOME"], "unset HOME", env, io.StringIO())
    assert env.get("HOME") is None
    assert len(env) == 1


def test_run_builtin_unset_without_name(env):
    run_builtin(["unset"], "unset", env, io.StringIO())
    assert len(env) == 2


def test_run_builtin_echo_uses_line(env):
    out = io.StringIO()
    run_builtin(["echo", "'a", "b'"], "echo 'a  b'", env, out)
    assert out.getvalue() == "a  b\n"


def test_run_builtin_pwd(tmp_path, monkeypatch, env):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    run_builtin(["pwd"], "pwd", env, out)
    text = out.getvalue()
    assert text.endswith("\n")
    assert Path(text.rstrip("\n")).resolve() == tmp_path.resolve()


def test_run_builtin_cd(tmp_path, monkeypatch, env):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "dir"
    target.mkdir()
    assert run_builtin(["cd", str(target)], f"cd {target}", env, io.StringIO())
    assert Path(os.getcwd()).resolve() == target.resolve()
    assert Path(env.get("PWD")).resolve() == target.resolve()


def test_run_builtin_cd_failure_reports(tmp_path, monkeypatch, env, capsys):
    monkeypatch.chdir(tmp_path)
    missing = tmp_path / "nope"
    assert run_builtin(["cd", str(missing)], f"cd {missing}", env, io.StringIO())
    assert capsys.readouterr().err.startswith("cd: ")
    assert Path(os.getcwd()).resolve() == tmp_path.resolve()
    assert env.get("PWD") is None