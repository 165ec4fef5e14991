"""GalleryPage - the demo's host page, backed by the static layout."""
from __future__ import annotations

from parallax import StaticPage

from game.layout import SECTION_H, SECTIONS, BoxSpec, page_height, section_top


class GalleryPage(StaticPage):
    """StaticPage with a bounded scroll offset and box lookup for rendering."""

    def __init__(self, viewport_height: float) -> None:
        super().__init__(viewport_height=viewport_height)
        self.boxes: dict[str, tuple[str, BoxSpec]] = {}
        for index, section in enumerate(SECTIONS):
            self.add_element(
                section.container,
                roles=["parallax-container"],
                top=section_top(index),
                height=SECTION_H,
            )
            for box in section.boxes:
                self.add_element(box.element, parent=section.container)
                self.boxes[box.element] = (section.container, box)

    @property
    def max_scroll(self) -> float:
        return max(0.0, page_height() - self.viewport_height)

    def scroll_by(self, delta: float) -> None:
        self.scroll_to(min(self.max_scroll, max(0.0, self.scroll_top + delta)))

    def resize(self, viewport_height: float) -> None:
        self.viewport_height = viewport_height
        self.scroll_by(0)
