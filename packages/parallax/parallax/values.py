"""ValueTemplate - a property value split into numbers and a placeholder template.

A raw value such as ``rotate(45deg) scale(1.5)`` decomposes into the numbers
``[45.0, 1.5]`` and the template ``rotate(@deg) scale(@)``. Interpolated
values are produced by substituting new numbers into the template by
position, so units, function wrappers and separators survive verbatim.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Sequence

PLACEHOLDER = "@"

# Signed-optional integer or decimal literal.
_NUMBER_RE = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")


def format_number(value: float) -> str:
    """Render an interpolated component: 6 fractional digits, trailing zeros dropped."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


@dataclass(frozen=True)
class ValueTemplate:
    """One property's authored value at one progress point."""

    progress: float
    raw_value: str
    numbers: tuple[float, ...]
    template: str
    literals: tuple[str, ...] = field(repr=False)
    _chunks: tuple[str, ...] = field(repr=False, compare=False)

    @classmethod
    def parse(cls, progress: float, raw_value: str) -> ValueTemplate:
        literals = tuple(m.group(0) for m in _NUMBER_RE.finditer(raw_value))
        chunks = tuple(_NUMBER_RE.split(raw_value))
        return cls(
            progress=progress,
            raw_value=raw_value,
            numbers=tuple(float(lit) for lit in literals),
            template=PLACEHOLDER.join(chunks),
            literals=literals,
            _chunks=chunks,
        )

    @property
    def is_constant(self) -> bool:
        """Keyword values like ``none`` carry no numbers and never interpolate."""
        return not self.numbers

    def render(self, numbers: Sequence[float]) -> str:
        """Fill the template's placeholders in order.

        Components equal to this value's own number keep the authored
        literal, so ``render(self.numbers)`` reproduces ``raw_value``.
        Surplus numbers are ignored; missing ones keep the authored literal.
        """
        parts = [self._chunks[0]]
        for i, literal in enumerate(self.literals):
            if i < len(numbers) and numbers[i] != self.numbers[i]:
                parts.append(format_number(numbers[i]))
            else:
                parts.append(literal)
            parts.append(self._chunks[i + 1])
        return "".join(parts)
