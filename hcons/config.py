from __future__ import annotations
import os
from typing import Optional


_TRUTHY = ("1", "true", "yes", "on")


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def int_from_env(var: str) -> Optional[int]:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value >= 0 else None


def strict_identity() -> bool:
    # read per call so tables built after an env change pick it up
    return flag_from_env('HCONS_STRICT_IDENTITY')


def get_render_limit() -> Optional[int]:
    return int_from_env('HCONS_RENDER_LIMIT')
