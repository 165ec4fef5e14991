"""Parallax configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

OUT_OF_RANGE_MODES = ("clamp", "unset")


@dataclass(frozen=True)
class ParallaxConfig:
    """Immutable configuration shared by definitions, engines and the scheduler.

    Attributes:
        precision: Fractional digits progress is rounded to before clamping.
        out_of_range: ``"clamp"`` holds the first/last keyframe outside the
            keyed range; ``"unset"`` emits the unset signal whenever the real
            progress leaves [0, 1].
        modifier_delimiter: Separator between an animation name and its
            modifiers in the attribute text.
        container_role: Role token marking an ancestor as the progress container.
        skip_settled: Skip off-screen elements already settled at the end the
            scroll is moving away from.
        alpha_default: Value substituted for a missing alpha component of a
            color property.
    """

    precision: int = 6
    out_of_range: str = "clamp"
    modifier_delimiter: str = ":"
    container_role: str = "parallax-container"
    skip_settled: bool = True
    alpha_default: float = 1.0

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")
        if self.out_of_range not in OUT_OF_RANGE_MODES:
            raise ValueError(
                f"out_of_range must be one of {OUT_OF_RANGE_MODES}, got {self.out_of_range!r}"
            )
        if not self.modifier_delimiter or self.modifier_delimiter.isspace():
            raise ValueError("modifier_delimiter must be a non-whitespace string")
        if not self.container_role:
            raise ValueError("container_role must be non-empty")

    @property
    def unset_outside(self) -> bool:
        return self.out_of_range == "unset"
