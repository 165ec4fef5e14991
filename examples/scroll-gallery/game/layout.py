"""Page layout: containers stacked vertically, each with animated boxes."""
from __future__ import annotations

from dataclasses import dataclass

SECTION_H = 360
SECTION_GAP = 480
PAGE_TOP = 640


@dataclass(frozen=True)
class BoxSpec:
    element: str
    attribute: str
    x: float
    y: float  # offset inside the section
    size: float = 60.0


@dataclass(frozen=True)
class SectionSpec:
    container: str
    title: str
    boxes: tuple[BoxSpec, ...]


SECTIONS: tuple[SectionSpec, ...] = (
    SectionSpec(
        "intro",
        "fade + slide",
        (BoxSpec("intro.a", "fade slide", 40, 60), BoxSpec("intro.b", "slide:reverse", 40, 200)),
    ),
    SectionSpec(
        "growth",
        "grow / grow:scale(0.5)",
        (BoxSpec("growth.a", "grow tint", 60, 40), BoxSpec("growth.b", "grow:scale(0.5) tint:reverse", 360, 40)),
    ),
    SectionSpec(
        "spin",
        "spin:shift(25) + missing animation",
        (BoxSpec("spin.a", "spin:shift(25) fade", 200, 120), BoxSpec("spin.b", "no-such-keyframes", 420, 120)),
    ),
)


def section_top(index: int) -> float:
    return PAGE_TOP + index * (SECTION_H + SECTION_GAP)


def page_height() -> float:
    return section_top(len(SECTIONS)) + PAGE_TOP
