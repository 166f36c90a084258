import pytest

from hcons import config
from hcons.types.table import InternTable


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1", True),
        ("true", True),
        ("YES", True),
        (" on ", True),
        ("0", False),
        ("off", False),
        ("", False),
    ],
)
def test_strict_identity_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("HCONS_STRICT_IDENTITY", raw)
    assert config.strict_identity() is expected
    table = InternTable()
    assert table.strict is expected
    table.release()


def test_strict_identity_unset(monkeypatch):
    monkeypatch.delenv("HCONS_STRICT_IDENTITY", raising=False)
    assert config.strict_identity() is False


def test_explicit_argument_wins_over_environment(monkeypatch):
    monkeypatch.setenv("HCONS_STRICT_IDENTITY", "1")
    table = InternTable(strict=False)
    assert table.strict is False
    table.release()


@pytest.mark.parametrize("raw,expected", [("5", 5), ("0", 0), ("", None), ("lots", None), ("-3", None)])
def test_render_limit(monkeypatch, raw, expected):
    monkeypatch.setenv("HCONS_RENDER_LIMIT", raw)
    assert config.get_render_limit() == expected
