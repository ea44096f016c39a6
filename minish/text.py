"""Text helpers for splitting, tidying and inspecting command lines."""

from __future__ import annotations

import re

QUOTES = "'\""
SPECIAL_CHARS = ", +-=/^@#%:~´.'"

_SPACE_RUN = re.compile(r" [ \t]*")


class QuoteError(ValueError):
    """Raised when a command line has an unclosed quote."""

    def __init__(self, message: str = "unclosed quotes") -> None:
        super().__init__(message)


def split_args(line: str, delimiter: str = " ") -> list[str]:
    """Split ``line`` on ``delimiter``, keeping quoted runs together.

    The quote state flips on every single or double quote, and a
    delimiter met while inside quotes does not split.  Quote characters
    stay in the words; empty words are dropped.
    """
    words: list[str] = []
    current: list[str] = []
    quoted = False
    for char in line:
        if char in QUOTES:
            quoted = not quoted
        if char == delimiter and not quoted:
            if current:
                words.append("".join(current))
                current = []
            continue
        current.append(char)
    if current:
        words.append("".join(current))
    return words


def squeeze_spaces(text: str) -> str | None:
    """Trim leading blanks and collapse blanks that follow a space.

    Returns the tidied text, or None when nothing is left.
    """
    squeezed = _SPACE_RUN.sub(" ", text.lstrip(" \t"))
    if squeezed.endswith(" "):
        squeezed = squeezed[:-1]
    return squeezed or None


def quotes_balanced(text: str) -> bool:
    """Tell whether every single and double quote in ``text`` is closed."""
    in_single = False
    in_double = False
    for char in text:
        if char == "'" and not in_double:
            in_single = not in_single
        elif char == '"' and not in_single:
            in_double = not in_double
    return not in_single and not in_double


def is_special_char(char: str) -> bool:
    """Tell whether ``char`` is one of the shell's special punctuation marks."""
    return len(char) == 1 and char in SPECIAL_CHARS


def is_echo_printable(char: str) -> bool:
    """Tell whether ``char`` is special or printable ASCII."""
    if is_special_char(char):
        return True
    return len(char) == 1 and 31 < ord(char) < 127