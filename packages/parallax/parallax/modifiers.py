"""Timeline modifiers applied to keyframe progress values."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

# Adjusted keys are rounded so that e.g. shift(10) on 0.2 lands exactly on 0.3.
_KEY_DIGITS = 10


def reverse(progress: float) -> float:
    return 1 - progress


def shift(progress: float, percent: float) -> float:
    return progress + percent / 100


def scale(progress: float, factor: float) -> float:
    return progress * factor


MODIFIERS: dict[str, tuple[int, Callable[..., float]]] = {
    "reverse": (0, reverse),
    "shift": (1, shift),
    "scale": (1, scale),
}


@dataclass(frozen=True)
class Modifier:
    name: str
    args: tuple[float, ...] = ()

    def apply(self, progress: float) -> float:
        _, fn = MODIFIERS[self.name]
        return fn(progress, *self.args)

    def __str__(self) -> str:
        if not self.args:
            return self.name
        return f"{self.name}({', '.join(f'{a:g}' for a in self.args)})"


def apply_modifiers(progress: float, modifiers: Sequence[Modifier]) -> float:
    """Apply modifiers cumulatively, left to right."""
    if not modifiers:
        return progress
    for modifier in modifiers:
        progress = modifier.apply(progress)
    return round(progress, _KEY_DIGITS)
