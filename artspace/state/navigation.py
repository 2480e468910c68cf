"""Navigation state - the cursor into the catalog."""

from __future__ import annotations
from dataclasses import dataclass


def advance_index(index: int, count: int) -> int:
    """Index after 'Next', wrapping from the last entry to the first."""
    return (index + 1) % count


def retreat_index(index: int, count: int) -> int:
    """Index after 'Previous', wrapping from the first entry to the last."""
    return (index - 1 + count) % count


@dataclass
class NavigationState:
    """Cursor with wraparound. Invariant: 0 <= current_index < count."""
    count: int
    current_index: int = 0

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"count must be >= 1, got {self.count}")
        if not 0 <= self.current_index < self.count:
            raise IndexError(f"index {self.current_index} out of range [0, {self.count})")

    def select(self, index: int) -> int:
        """Move the cursor to index. Every cursor change goes through here."""
        if not 0 <= index < self.count:
            raise IndexError(f"index {index} out of range [0, {self.count})")
        self.current_index = index
        return index

    def peek_next(self) -> int:
        return advance_index(self.current_index, self.count)

    def peek_previous(self) -> int:
        return retreat_index(self.current_index, self.count)

    def advance(self) -> int:
        """Step forward one artwork and return the new index."""
        return self.select(self.peek_next())

    def retreat(self) -> int:
        """Step back one artwork and return the new index."""
        return self.select(self.peek_previous())
