"""Intern table: the hash-consed value factory and cache.

The table maps every live value to its single Cell. It is itself reference
counted: the creator holds one reference and every Cell holds another, so the
table outlives its creator for as long as any Handle keeps a Cell alive. When the
last reference goes the map must already be empty.
"""

from __future__ import annotations

import logging
from typing import Generic, Iterator, Optional

from hcons import T
from hcons import config
from hcons.debug_utils.render import render_table
from hcons.errors import (
    HashConsDoubleRelease,
    HashConsInvariantError,
    HashConsTableNotEmpty,
    HashConsUseAfterFree,
)
from hcons.types.cell import Cell
from hcons.types.handle import Handle

logger = logging.getLogger(__name__)


class InternTable(Generic[T]):
    """Canonicalizing map from structural values to their single live Cell.

    Not thread-safe: the map and every count are mutated in place.
    """

    __slots__ = ("_map", "_refs", "strict")

    def __init__(self, strict: Optional[bool] = None):
        # Cell -> Cell, keyed by the Cell's structural equality/hash
        self._map: dict[Cell[T], Cell[T]] | None = {}
        # the creator's reference
        self._refs: int = 1
        self.strict: bool = config.strict_identity() if strict is None else strict
        logger.debug("new table %#x (strict=%s)", id(self), self.strict)

    # --- Factory ---
    def intern(self, value: T) -> Handle[T]:
        """Return a Handle to the canonical Cell for `value`.

        A trial Cell is built first; if a structurally equal entry already
        exists the trial is freed and the existing Cell is shared instead.
        """
        live = self._live_map()
        logger.debug("h-cons %r in %#x", value, id(self))
        trial = Cell.allocate(self, value)
        try:
            existing = live.get(trial)
        except BaseException:
            # value's own __hash__/__eq__ failed; leave the table untouched
            trial.free()
            raise
        if existing is not None:
            logger.debug(
                "recycle %#x (already %d refs)", id(existing), existing.refs
            )
            trial.free()
            return Handle.wrap(existing)
        logger.debug("new val %#x in %#x", id(trial), id(self))
        live[trial] = trial
        return Handle.wrap(trial)

    # --- Ownership ---
    def share(self) -> InternTable[T]:
        """Register one more owner of this table and return it."""
        return self._acquire()

    def release(self) -> None:
        """Give back one owner reference (the creator's, or one from share())."""
        self._release()

    def __enter__(self) -> InternTable[T]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def _acquire(self) -> InternTable[T]:
        self._live_map()
        self._refs += 1
        return self

    def _release(self) -> None:
        if self._refs == 0:
            raise HashConsDoubleRelease(f"table {id(self):#x} released past zero")
        self._refs -= 1
        logger.debug("del ref table %#x (%d refs remaining)", id(self), self._refs)
        if self._refs == 0:
            if self._map:
                raise HashConsTableNotEmpty(
                    f"table {id(self):#x} freed with {len(self._map)} live entries"
                )
            logger.debug("del val table %#x", id(self))
            self._map = None

    def _remove_entry(self, cell: Cell[T]) -> None:
        # only reached from Handle.release once the count hit zero
        live = self._live_map()
        registered = live.pop(cell, None)
        if registered is not cell:
            if registered is not None:
                live[registered] = registered
            raise HashConsInvariantError(
                f"cell {id(cell):#x} is not registered in table {id(self):#x}"
            )

    def _live_map(self) -> dict[Cell[T], Cell[T]]:
        if self._map is None:
            raise HashConsUseAfterFree(f"table {id(self):#x} has been freed")
        return self._map

    # --- Inspection ---
    @property
    def refs(self) -> int:
        return self._refs

    @property
    def alive(self) -> bool:
        return self._map is not None

    def entries(self) -> Iterator[tuple[T, int]]:
        """Yield (value, live count) for every registered Cell."""
        if self._map is None:
            return
        for cell in self._map:
            yield cell.value, cell.refs

    def refcount(self, value: T) -> int:
        if self._map is None:
            return 0
        cell = self._map.get(Cell(value))
        return 0 if cell is None else cell.refs

    def __contains__(self, value: object) -> bool:
        return self._map is not None and Cell(value) in self._map

    def __len__(self) -> int:
        return 0 if self._map is None else len(self._map)

    def __str__(self) -> str:
        return render_table(self)

    def __repr__(self) -> str:
        if self._map is None:
            return f"<InternTable {id(self):#x} freed>"
        return f"<InternTable {id(self):#x} entries={len(self._map)} refs={self._refs}>"
