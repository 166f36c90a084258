"""Reference-counted handles to hash-consed values."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic

from hcons import T
from hcons.errors import (
    HashConsDoubleRelease,
    HashConsTableMismatch,
    HashConsUseAfterFree,
)
from hcons.types.cell import Cell

if TYPE_CHECKING:
    from hcons.types.table import InternTable

logger = logging.getLogger(__name__)


class Handle(Generic[T]):
    """A consumer's reference to the canonical Cell of a value.

    Built through an InternTable, it points to the single copy of the value in
    that table. Equality and hashing use the Cell's identity, so they are O(1)
    regardless of the value's size.

    Beware that identity comparison only makes sense between Handles built by
    the same table. Comparing Handles from different tables is the caller's
    responsibility; a strict table raises HashConsTableMismatch instead.
    """

    __slots__ = ("_cell", "_hash")

    def __init__(self, cell: Cell[T]):
        # Handles come from InternTable.intern or clone(), never directly.
        cell.inc_refs()
        self._cell: Cell[T] | None = cell
        self._hash: int = hash(id(cell))

    @classmethod
    def wrap(cls, cell: Cell[T]) -> Handle[T]:
        handle = cls(cell)
        logger.debug("new ref %#x (%d refs total)", id(cell), cell.refs)
        return handle

    def _live_cell(self) -> Cell[T]:
        cell = self._cell
        if cell is None:
            raise HashConsUseAfterFree("handle has already been released")
        return cell

    # --- Access ---
    @property
    def value(self) -> T:
        return self._live_cell().value

    def get(self) -> T:
        """Return the canonical value."""
        return self._live_cell().value

    @property
    def table(self) -> InternTable[T]:
        return table_of(self)

    @property
    def released(self) -> bool:
        return self._cell is None

    # --- Reference counting ---
    def clone(self) -> Handle[T]:
        """Get a new reference to this hash-consed value."""
        cell = self._live_cell()
        handle = type(self)(cell)
        logger.debug("new ref %#x (clone, %d refs total)", id(cell), cell.refs)
        return handle

    def __copy__(self) -> Handle[T]:
        return self.clone()

    def __deepcopy__(self, memo) -> Handle[T]:
        # a deep copy still shares the canonical Cell
        return self.clone()

    def release(self) -> None:
        """Drop this reference; the last one removes the value from its table.

        Raises HashConsDoubleRelease if this Handle was already released.
        """
        cell = self._cell
        if cell is None:
            raise HashConsDoubleRelease("handle released twice")
        self._cell = None
        remaining = cell.dec_refs()
        logger.debug("del ref %#x (%d refs remaining)", id(cell), remaining)
        if remaining == 0:
            table = cell.table
            table._remove_entry(cell)
            cell.free()

    def __enter__(self) -> Handle[T]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._cell is not None:
            self.release()

    def __del__(self):
        # automatic release once the last Python reference to the Handle goes
        if getattr(self, "_cell", None) is not None:
            self.release()

    # --- Identity semantics ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Handle):
            return NotImplemented
        mine, theirs = self._live_cell(), other._live_cell()
        if mine is theirs:
            return True
        if mine.table is not theirs.table and (mine.table.strict or theirs.table.strict):
            raise HashConsTableMismatch(
                f"cannot compare handles from tables {id(mine.table):#x} "
                f"and {id(theirs.table):#x}"
            )
        return False

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        if self._cell is None:
            return "Handle(<released>)"
        return f"Handle({self._cell.value!r})"

    def __str__(self) -> str:
        return str(self._live_cell().value)


def table_of(handle: Handle[T]) -> InternTable[T]:
    """Return the table owning `handle`'s Cell. Does not take a reference."""
    return handle._live_cell().table
