"""Scroll progress of a container through the viewport.

0.0 when the container's top edge meets the viewport's bottom edge,
1.0 when the container's bottom edge meets the viewport's top edge.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from parallax.errors import DegenerateGeometryError


@dataclass(frozen=True, slots=True)
class ContainerGeometry:
    top: float  # document coordinate
    height: float


@dataclass(frozen=True, slots=True)
class ViewportState:
    height: float
    scroll_top: float


@dataclass(frozen=True, slots=True)
class ProgressState:
    """Rounded progress: ``real`` is unclamped, ``normalized`` is clamped to [0, 1]."""

    normalized: float
    real: float

    @property
    def in_range(self) -> bool:
        return 0 <= self.real <= 1

    @property
    def status(self) -> str:
        return "on" if self.in_range else "off"

    @property
    def label(self) -> str:
        return f"{math.floor(self.normalized * 100)}%"

    @property
    def approx(self) -> str:
        """Coarse buckets: 5% frames and 10% decades, e.g. ``"25f 20d"``."""
        return f"{math.floor(self.normalized * 20) * 5}f {math.floor(self.normalized * 10) * 10}d"


class ProgressCalculator:
    def __init__(self, precision: int = 6) -> None:
        if precision < 0:
            raise ValueError(f"precision must be >= 0, got {precision}")
        self._precision = precision

    @property
    def precision(self) -> int:
        return self._precision

    @staticmethod
    def span(geometry: ContainerGeometry, viewport: ViewportState) -> tuple[float, float]:
        """Scroll offsets at which progress is 0 and 1."""
        return geometry.top - viewport.height, geometry.top + geometry.height

    def calculate(self, geometry: ContainerGeometry, viewport: ViewportState) -> ProgressState:
        """Raises DegenerateGeometryError when the scroll span is zero."""
        progress0, progress100 = self.span(geometry, viewport)
        if progress100 == progress0:
            raise DegenerateGeometryError(
                f"Container span is zero (top={geometry.top}, height={geometry.height}, "
                f"viewport height={viewport.height})"
            )
        raw = (viewport.scroll_top - progress0) / (progress100 - progress0)
        real = round(raw, self._precision)
        normalized = min(1.0, max(0.0, real))
        return ProgressState(normalized=normalized, real=real)
