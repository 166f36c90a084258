import pytest

from hcons.types.cell import Cell
from hcons.types.table import InternTable
from hcons.errors import (
    HashConsDoubleRelease,
    HashConsInvariantError,
    HashConsUseAfterFree,
)


def test_allocate_takes_a_table_reference():
    table = InternTable()
    cell = Cell.allocate(table, (0, 1))
    assert cell.table is table
    assert cell.refs == 0
    assert table.refs == 2
    # an allocated cell is not registered until intern does it
    assert len(table) == 0
    cell.free()
    assert table.refs == 1
    table.release()
    assert not table.alive


def test_counts_move_by_one():
    table = InternTable()
    cell = Cell.allocate(table, "x")
    assert cell.inc_refs() == 1
    assert cell.inc_refs() == 2
    assert cell.dec_refs() == 1
    assert cell.dec_refs() == 0
    cell.free()
    table.release()


def test_decrement_below_zero_is_rejected():
    table = InternTable()
    cell = Cell.allocate(table, "x")
    with pytest.raises(HashConsDoubleRelease):
        cell.dec_refs()
    assert cell.refs == 0
    cell.free()
    table.release()


def test_free_with_live_references_is_rejected():
    table = InternTable()
    cell = Cell.allocate(table, "x")
    cell.inc_refs()
    with pytest.raises(HashConsInvariantError):
        cell.free()
    assert not cell.freed


def test_free_twice_is_rejected():
    table = InternTable()
    cell = Cell.allocate(table, "x")
    cell.free()
    with pytest.raises(HashConsDoubleRelease):
        cell.free()
    # the table reference was only given back once
    assert table.refs == 1
    table.release()


def test_freed_cell_cannot_be_referenced_again():
    table = InternTable()
    cell = Cell.allocate(table, "x")
    cell.free()
    assert cell.freed
    assert cell.value is None
    assert cell.table is None
    with pytest.raises(HashConsUseAfterFree):
        cell.inc_refs()
    table.release()


def test_structural_equality_and_hash_delegate_to_value():
    a = Cell((1, (2, 3)))
    b = Cell((1, (2, 3)))
    c = Cell((1, (2, 4)))
    assert a is not b
    assert a == b
    assert hash(a) == hash(b) == hash((1, (2, 3)))
    assert a != c
    # cells never compare equal to raw values
    assert a != (1, (2, 3))


def test_probe_cell_holds_no_table():
    probe = Cell("y")
    assert probe.table is None
    assert probe.refs == 0
    assert repr(probe) == "Cell('y', refs=0)"
