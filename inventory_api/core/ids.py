from __future__ import annotations

import os
import random
import time

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError("base36 encoding expects a non-negative integer")
    if value == 0:
        return "0"
    out = []
    while value:
        value, rem = divmod(value, 36)
        out.append(_DIGITS[rem])
    return "".join(reversed(out))


def _now_ms() -> int:
    return int(time.time() * 1000)


def generate_id(prefix: str = "") -> str:
    """
    prefix + base36(epoch millis) + base36(random suffix).
    Unique with overwhelming probability; collisions are not detected.
    """
    return prefix + to_base36(_now_ms()) + to_base36(random.randint(0, 1_000_000))


def generate_filename(original_name: str | None) -> str:
    """Upload name `<millis>-<random><ext>` keeping the original extension."""
    ext = os.path.splitext(original_name or "")[1]
    return f"{_now_ms()}-{random.randint(0, 999_999_999)}{ext}"
