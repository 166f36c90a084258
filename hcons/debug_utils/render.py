from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Optional

from hcons import config

if TYPE_CHECKING:
    from hcons.types.table import InternTable

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_COUNT = "\033[94m"
COLOR_SHARED_COUNT = "\033[92m"

_FROM_ENV = object()


def format_entry(value, refs: int, color: bool = False) -> str:
    """Render one live entry as "value (count)"."""
    count = str(refs)
    if color:
        # shared values (more than one handle) stand out
        tint = COLOR_SHARED_COUNT if refs > 1 else COLOR_COUNT
        count = f"{tint}{count}{RESET}"
    return f"{value!r} ({count})"


def render_table(
    table: InternTable,
    sort: bool = False,
    limit: Optional[int] = _FROM_ENV,
    color: bool = False,
) -> str:
    """Brace-delimited, comma-separated listing of a table's live entries.

    Entry order follows the table's map unless `sort` is set; callers must not
    rely on it. `limit` truncates the listing (default: HCONS_RENDER_LIMIT).
    """
    if limit is _FROM_ENV:
        limit = config.get_render_limit()
    items = [format_entry(value, refs, color) for value, refs in table.entries()]
    if sort:
        items.sort()
    with StringIO() as buffer:
        buffer.write("{")
        shown = items if limit is None else items[:limit]
        buffer.write(", ".join(shown))
        if len(shown) < len(items):
            buffer.write(", ..." if shown else "...")
        buffer.write("}")
        return buffer.getvalue()
