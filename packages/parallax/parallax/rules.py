"""Structured keyframes rules as delivered by a rule source."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyframeBlock:
    """One keyframe selector list and its declarations.

    Attributes:
        offsets: Progress fractions the block applies to (``50%`` -> 0.5).
        declarations: Ordered ``(property, value)`` pairs.
    """

    offsets: tuple[float, ...]
    declarations: tuple[tuple[str, str], ...]

    def __post_init__(self) -> None:
        if not self.offsets:
            raise ValueError("KeyframeBlock needs at least one offset")


@dataclass(frozen=True)
class KeyframesRule:
    """A named animation: keyframe blocks in authored order."""

    name: str
    blocks: tuple[KeyframeBlock, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("KeyframesRule name must be non-empty")

    @classmethod
    def from_dict(cls, name: str, frames: dict[float, dict[str, str]]) -> KeyframesRule:
        """Build a rule from ``{percent: {property: value}}``."""
        return cls(
            name=name,
            blocks=tuple(
                KeyframeBlock(offsets=(percent / 100,), declarations=tuple(decls.items()))
                for percent, decls in frames.items()
            ),
        )
