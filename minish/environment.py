"""The shell's table of environment variables."""

from __future__ import annotations

from collections.abc import Iterable

EMPTY_VALUE = "''"


def _is_var_char(char: str) -> bool:
    return char == "_" or (char.isascii() and char.isalnum())


class Environment:
    """Named string variables, newest first, updated in place."""

    def __init__(self) -> None:
        # Insertion order is oldest first; views reverse it.
        self._vars: dict[str, str] = {}

    @classmethod
    def from_entries(cls, entries: Iterable[str]) -> Environment:
        """Build an environment from ``NAME=value`` strings."""
        env = cls()
        for entry in entries:
            env.set_entry(entry)
        return env

    def set(self, name: str, value: str | None) -> None:
        """Set ``name``; a missing value is stored as two single quotes."""
        self._vars[name] = EMPTY_VALUE if value is None else value

    def set_entry(self, entry: str) -> None:
        """Set a variable from ``NAME=value``, or ``NAME`` alone."""
        name, sep, value = entry.partition("=")
        self.set(name, value if sep else EMPTY_VALUE)

    def get(self, name: str) -> str | None:
        """Return the value of exactly ``name``, or None."""
        return self._vars.get(name)

    def lookup(self, text: str) -> str | None:
        """Return the value of the variable whose name starts ``text``.

        The name must be followed in ``text`` by a character that cannot
        belong to a variable name, or by the end of ``text``.
        """
        for name, value in self.items():
            if text.startswith(name):
                rest = text[len(name):]
                if not rest or not _is_var_char(rest[0]):
                    return value
        return None

    def unset(self, name: str) -> None:
        """Remove ``name`` if it is set."""
        self._vars.pop(name, None)

    def items(self) -> list[tuple[str, str]]:
        """Return ``(name, value)`` pairs, newest first."""
        return list(reversed(self._vars.items()))

    def env_lines(self) -> list[str]:
        """Return the lines the ``env`` builtin prints."""
        return [f"{name}={value}" for name, value in self.items()]

    def export_lines(self) -> list[str]:
        """Return the lines a bare ``export`` prints, sorted by name."""
        return [
            f'declare -x {name}="{value}"'
            for name, value in sorted(self._vars.items())
        ]

    def __len__(self) -> int:
        return len(self._vars)