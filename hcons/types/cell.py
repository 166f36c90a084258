"""Backing storage for one canonical value.

A Cell couples the canonical value with the table that registered it and the
number of live Handles pointing at it. Equality and hashing delegate to the held
value, which is what lets the owning table use Cells directly as map keys.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Optional

from hcons import T
from hcons.errors import (
    HashConsDoubleRelease,
    HashConsInvariantError,
    HashConsUseAfterFree,
)

if TYPE_CHECKING:
    from hcons.types.table import InternTable

logger = logging.getLogger(__name__)


class Cell(Generic[T]):
    """Canonical value, owning table back-reference and live-handle count."""

    __slots__ = ("value", "table", "refs", "freed")

    def __init__(self, value: T, table: Optional[InternTable[T]] = None):
        # A Cell built directly (no table) is only a lookup probe.
        self.value: T = value
        self.table: InternTable[T] | None = table
        self.refs: int = 0
        self.freed: bool = False

    @classmethod
    def allocate(cls, table: InternTable[T], value: T) -> Cell[T]:
        """Build an unregistered Cell holding its own reference to `table`."""
        return cls(value, table._acquire())

    def inc_refs(self) -> int:
        if self.freed:
            raise HashConsUseAfterFree(f"cannot reference freed cell {id(self):#x}")
        self.refs += 1
        return self.refs

    def dec_refs(self) -> int:
        """Drop one live reference and return how many remain.

        Raises HashConsDoubleRelease if the count is already zero.
        """
        if self.refs == 0:
            raise HashConsDoubleRelease(
                f"cell {id(self):#x} released with no live references"
            )
        self.refs -= 1
        return self.refs

    def free(self) -> None:
        """Reclaim the Cell and give back the table reference it holds.

        Only valid once the Cell is out of its table's map and its count is zero.
        """
        if self.freed:
            raise HashConsDoubleRelease(f"cell {id(self):#x} freed twice")
        if self.refs != 0:
            raise HashConsInvariantError(
                f"cell {id(self):#x} freed with {self.refs} live references"
            )
        logger.debug("del val %#x", id(self))
        self.freed = True
        self.value = None
        table, self.table = self.table, None
        if table is not None:
            table._release()

    # --- Structural key semantics ---
    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Cell):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        state = "freed" if self.freed else f"refs={self.refs}"
        return f"Cell({self.value!r}, {state})"
