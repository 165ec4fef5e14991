"""Convert emitted style values into pygame drawing parameters."""
from __future__ import annotations

import re

_NUMBER_RE = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")


def numbers(value: str) -> list[float]:
    return [float(n) for n in _NUMBER_RE.findall(value)]


def length(value: str | None, default: float) -> float:
    found = numbers(value) if value else []
    return found[0] if found else default


def opacity(value: str | None) -> float:
    return max(0.0, min(1.0, length(value, 1.0)))


def color(value: str | None, default: tuple[int, int, int]) -> tuple[tuple[int, int, int], float]:
    """``rgb(...)``/``rgba(...)`` -> ((r, g, b), alpha)."""
    found = numbers(value) if value else []
    if len(found) < 3:
        return default, 1.0
    r, g, b = (int(max(0, min(255, c))) for c in found[:3])
    alpha = found[3] if len(found) > 3 else 1.0
    return (r, g, b), max(0.0, min(1.0, alpha))


def rotation(value: str | None) -> float:
    if not value or "rotate" not in value:
        return 0.0
    return length(value, 0.0)
