"""A last-in, first-out stack of tag names."""

from __future__ import annotations

from collections.abc import Iterator


class EmptyStackError(IndexError):
    """Raised when reading from an empty tag stack."""


class TagStack:
    """Stack of tag names used to match opening and closing tags."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def push(self, tag: str) -> None:
        """Put a tag name on top of the stack."""
        self._items.append(tag)

    def pop(self) -> str:
        """Remove and return the tag name on top of the stack."""
        if not self._items:
            raise EmptyStackError("pop from an empty tag stack")
        return self._items.pop()

    def peek(self) -> str:
        """Return the tag name on top of the stack without removing it."""
        if not self._items:
            raise EmptyStackError("peek at an empty tag stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        """Drop every tag name on the stack."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        """Iterate from the top of the stack down."""
        return reversed(self._items)