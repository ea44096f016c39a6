"""Expansion of ``$NAME`` references in a command line."""

from __future__ import annotations

from minish.environment import Environment
from minish.text import QuoteError, quotes_balanced


def _is_name_char(char: str) -> bool:
    return char == "_" or (char.isascii() and char.isalnum())


def expand(text: str, env: Environment) -> str:
    """Replace ``$NAME`` references in ``text`` with their values.

    Quote characters are kept.  Nothing is expanded inside single
    quotes; double quotes do not stop expansion.  A reference to an
    unset variable expands to nothing, and a ``$`` not followed by a
    name character is kept as it is.

    Raises QuoteError when ``text`` has an unclosed quote.
    """
    if not quotes_balanced(text):
        raise QuoteError()
    pieces: list[str] = []
    in_single = False
    in_double = False
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        if char == "'" and not in_double:
            in_single = not in_single
            pieces.append(char)
            pos += 1
        elif char == '"' and not in_single:
            in_double = not in_double
            pieces.append(char)
            pos += 1
        elif (
            char == "$"
            and not in_single
            and pos + 1 < length
            and _is_name_char(text[pos + 1])
        ):
            end = pos + 1
            while end < length and _is_name_char(text[end]):
                end += 1
            value = env.lookup(text[pos + 1:end])
            if value is not None:
                pieces.append(value)
            pos = end
        else:
            pieces.append(char)
            pos += 1
    return "".join(pieces)