"""Tests for parallax.progress - ProgressCalculator."""
from __future__ import annotations

import pytest

from parallax.errors import DegenerateGeometryError
from parallax.progress import ContainerGeometry, ProgressCalculator, ProgressState, ViewportState


class TestCalculate:
    def test_reference_geometry(self) -> None:
        calc = ProgressCalculator()
        geometry = ContainerGeometry(top=1000, height=200)
        viewport = ViewportState(height=800, scroll_top=400)
        assert calc.span(geometry, viewport) == (200, 1200)
        state = calc.calculate(geometry, viewport)
        assert state.normalized == 0.2
        assert state.real == 0.2

    def test_before_range_clamps(self) -> None:
        state = ProgressCalculator().calculate(
            ContainerGeometry(top=1000, height=200), ViewportState(height=800, scroll_top=0)
        )
        assert state.real == -0.2
        assert state.normalized == 0.0

    def test_after_range_clamps(self) -> None:
        state = ProgressCalculator().calculate(
            ContainerGeometry(top=1000, height=200), ViewportState(height=800, scroll_top=1700)
        )
        assert state.real == 1.5
        assert state.normalized == 1.0

    def test_rounding(self) -> None:
        state = ProgressCalculator().calculate(
            ContainerGeometry(top=0, height=0), ViewportState(height=3, scroll_top=-2)
        )
        assert state.real == 0.333333

    def test_custom_precision(self) -> None:
        state = ProgressCalculator(precision=2).calculate(
            ContainerGeometry(top=0, height=0), ViewportState(height=3, scroll_top=-2)
        )
        assert state.real == 0.33

    def test_negative_precision_rejected(self) -> None:
        with pytest.raises(ValueError):
            ProgressCalculator(precision=-1)

    def test_degenerate_span(self) -> None:
        with pytest.raises(DegenerateGeometryError):
            ProgressCalculator().calculate(
                ContainerGeometry(top=500, height=0), ViewportState(height=0, scroll_top=10)
            )


class TestProgressState:
    def test_status(self) -> None:
        assert ProgressState(normalized=0.5, real=0.5).status == "on"
        assert ProgressState(normalized=1.0, real=1.0).status == "on"
        assert ProgressState(normalized=1.0, real=1.01).status == "off"
        assert ProgressState(normalized=0.0, real=-0.01).status == "off"

    def test_labels(self) -> None:
        state = ProgressState(normalized=0.27, real=0.27)
        assert state.label == "27%"
        assert state.approx == "25f 20d"

    def test_labels_at_end(self) -> None:
        state = ProgressState(normalized=1.0, real=3.0)
        assert state.label == "100%"
        assert state.approx == "100f 100d"
