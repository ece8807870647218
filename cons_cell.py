"""Immutable integer cons cell with a membership query."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Cons:
    value: int
    next: Optional["Cons"] = None

    def member(self, target: int) -> bool:
        """Return True if target equals the value of this cell or any cell after it.

        First match wins. Walks the chain with a loop rather than recursing
        into next, so chain length is not bounded by the recursion limit.
        """
        current = self
        while current is not None:
            if current.value == target:
                return True
            current = current.next
        return False
