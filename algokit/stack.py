"""A stack backed by a singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass(slots=True)
class _Node:
    value: Any
    below: "_Node | None"


class LinkedStack:
    """Last-in first-out stack built from linked nodes."""

    def __init__(self, values: Iterable = ()) -> None:
        self._top: _Node | None = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise IndexError("pop from empty stack")
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise IndexError("peek at empty stack")
        return self._top.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator:
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __repr__(self) -> str:
        return f"LinkedStack({list(reversed(list(self)))!r})"