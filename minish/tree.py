"""Parsing a command line into a tree of operators and commands."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from minish.text import squeeze_spaces

# Checked in this order; the first one present splits the line.
OPERATORS: tuple[str, ...] = ("|", ">>", "<<", ">", "<")


@dataclass
class Node:
    """One node of a command tree: an operator with two sides, or a command."""

    command: str | None = None
    operator: str | None = None
    index: int = 0
    left: Node | None = None
    right: Node | None = None

    @property
    def label(self) -> str | None:
        """The command text, or the operator when there is no command."""
        return self.command if self.command is not None else self.operator


def _parse(text: str) -> Node:
    for operator in OPERATORS:
        before, found, after = text.partition(operator)
        if found:
            return Node(
                operator=operator,
                left=_parse(before),
                right=_parse(after),
            )
    return Node(command=squeeze_spaces(text))


def parse_line(line: str | None) -> Node | None:
    """Parse ``line`` into a tree, or return None for an empty line.

    The pipe binds loosest, then ``>>``, ``<<``, ``>`` and ``<``; each
    operator splits the text at its first occurrence.  A side with no
    words becomes a command node whose command is None.
    """
    if not line:
        return None
    return _parse(line)


def _walk(root: Node | None) -> Iterator[Node]:
    if root is None:
        return
    yield from _walk(root.left)
    yield root
    yield from _walk(root.right)


def tree_size(root: Node | None) -> int:
    """Count the nodes of the tree."""
    return sum(1 for _ in _walk(root))


def inorder(root: Node | None) -> list[str | None]:
    """Return each node's command or operator, left to right."""
    return [node.label for node in _walk(root)]


def number_nodes(root: Node | None) -> int:
    """Number the nodes from 1 in left-to-right order; return the count."""
    count = 0
    for count, node in enumerate(_walk(root), start=1):
        node.index = count
    return count


def describe(root: Node | None) -> list[str]:
    """Return one ``Operator:...$`` or ``Command:...$`` line per node."""
    lines = []
    for node in _walk(root):
        if node.operator:
            lines.append(f"Operator:{node.operator}$")
        else:
            shown = node.command if node.command is not None else "(null)"
            lines.append(f"Command:{shown}$")
    return lines