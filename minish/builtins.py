"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import errno
import os
import sys
from collections.abc import Sequence
from typing import TextIO

from minish.environment import Environment

BUILTINS = frozenset({"cd", "pwd", "exit", "export", "env", "unset", "echo"})


class ShellExit(Exception):
    """Raised by the ``exit`` builtin to end the shell."""

    def __init__(self, status: int = 0) -> None:
        super().__init__(f"exit {status}")
        self.status = status


def _echo_words(line: str) -> tuple[str, bool] | None:
    """Find the text ``echo`` prints and whether a newline follows it."""
    start = line.find("echo")
    if start < 0:
        return None
    space = line.find(" ", start)
    if space < 0:
        return "", True
    rest = line[space:]
    flag = rest.find("-n")
    if flag >= 0 and rest[flag + 2:flag + 3] == " ":
        return rest[flag + 2:].lstrip(" "), False
    return rest.lstrip(" \t"), True


def echo_output(line: str) -> str:
    """Return what ``echo`` prints for the full command ``line``.

    Quote characters are removed, runs of unquoted spaces become one
    space, and a ``-n`` followed by a space suppresses the newline.
    Returns an empty string when ``line`` holds no ``echo``.
    """
    found = _echo_words(line)
    if found is None:
        return ""
    words, newline = found
    pieces: list[str] = []
    in_single = False
    in_double = False
    pos = 0
    length = len(words)
    while pos < length:
        char = words[pos]
        if char == " " and not in_single and not in_double:
            while pos < length and words[pos] == " ":
                pos += 1
            if pos < length:
                pieces.append(" ")
            continue
        if char == "'" and not in_double:
            in_single = not in_single
        elif char == '"' and not in_single:
            in_double = not in_double
        else:
            pieces.append(char)
        pos += 1
    if newline:
        pieces.append("\n")
    return "".join(pieces)


def change_directory(path: str | None, env: Environment) -> str:
    """Change to ``path`` and record the new directory in ``PWD``.

    Returns the new working directory.  Raises OSError when the
    directory cannot be entered or ``path`` is missing.
    """
    if path is None:
        raise OSError(errno.EFAULT, os.strerror(errno.EFAULT))
    os.chdir(path)
    cwd = os.getcwd()
    env.set("PWD", cwd)
    return cwd


def working_directory() -> str:
    """Return the current working directory."""
    return os.getcwd()


def is_builtin(name: str) -> bool:
    """Tell whether ``name`` is a command the shell runs itself."""
    return name in BUILTINS


def _report(command: str, error: OSError) -> None:
    message = error.strerror or str(error)
    print(f"{command}: {message}", file=sys.stderr)


def run_builtin(
    args: Sequence[str],
    line: str,
    env: Environment,
    out: TextIO | None = None,
) -> bool:
    """Run the builtin named by ``args[0]``, writing its output to ``out``.

    ``line`` is the full expanded command line, which ``echo`` prints
    from.  Returns False when ``args`` names no builtin.  Raises
    ShellExit for ``exit``.
    """
    if not args or not is_builtin(args[0]):
        return False
    stream = sys.stdout if out is None else out
    name = args[0]
    operand = args[1] if len(args) > 1 else None
    if name == "cd":
        try:
            change_directory(operand, env)
        except OSError as error:
            _report("cd", error)
    elif name == "pwd":
        try:
            stream.write(working_directory() + "\n")
        except OSError as error:
            _report("pwd", error)
    elif name == "exit":
        raise ShellExit(0)
    elif name == "export":
        if operand is None:
            stream.writelines(f"{entry}\n" for entry in env.export_lines())
        else:
            env.set_entry(operand)
    elif name == "env":
        stream.writelines(f"{entry}\n" for entry in env.env_lines())
    elif name == "unset":
        if operand is not None:
            env.unset(operand)
    elif name == "echo":
        stream.write(echo_output(line))
    return True