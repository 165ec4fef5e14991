"""Draw sections, animated boxes and the status sidebar."""
from __future__ import annotations

import pygame

from parallax import ParallaxScheduler

from game.layout import SECTION_H, SECTIONS, section_top
from game.page import GalleryPage
from ui import style
from ui.constants import (
    BOX_COLOR,
    ERROR_COLOR,
    SCREEN_W,
    SECTION_BG,
    SECTION_BORDER,
    SIDEBAR_BG,
    SIDEBAR_W,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_page(surface: pygame.Surface, page: GalleryPage, font: pygame.font.Font) -> None:
    width = SCREEN_W - SIDEBAR_W
    for index, section in enumerate(SECTIONS):
        y = section_top(index) - page.scroll_top
        if y > page.viewport_height or y + SECTION_H < 0:
            continue
        rect = pygame.Rect(0, int(y), width, SECTION_H)
        pygame.draw.rect(surface, SECTION_BG, rect)
        pygame.draw.rect(surface, SECTION_BORDER, rect, 1)
        status = page.statuses.get(section.container)
        label = f"{section.title}  [{status.progress_label if status else '--'}]"
        surface.blit(font.render(label, True, TEXT_DIM), (8, int(y) + 6))
        for box in section.boxes:
            _draw_box(surface, page, box.element, y)


def _draw_box(surface: pygame.Surface, page: GalleryPage, element: str, section_y: float) -> None:
    _, spec = page.boxes[element]
    css = page.styles.get(element, {})
    status = page.statuses.get(element)

    w = style.length(css.get("width"), spec.size)
    h = style.length(css.get("height"), spec.size)
    x = spec.x + style.length(css.get("left"), 0.0)
    y = section_y + spec.y
    rgb, alpha = style.color(css.get("background-color"), BOX_COLOR)
    if status is not None and status.status == "error":
        rgb, alpha = ERROR_COLOR, 1.0
    alpha *= style.opacity(css.get("opacity"))

    box = pygame.Surface((max(1, int(w)), max(1, int(h))), pygame.SRCALPHA)
    box.fill((*rgb, int(255 * alpha)))
    angle = style.rotation(css.get("transform"))
    if angle:
        box = pygame.transform.rotate(box, -angle)
    surface.blit(box, box.get_rect(center=(int(x + w / 2), int(y + h / 2))))


def draw_sidebar(
    surface: pygame.Surface,
    scheduler: ParallaxScheduler,
    page: GalleryPage,
    font: pygame.font.Font,
) -> None:
    x = SCREEN_W - SIDEBAR_W
    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, int(page.viewport_height)))

    pad = 10
    line_h = 20
    cy = 8
    surface.blit(font.render("BINDINGS", True, TEXT_COLOR), (x + pad, cy))
    cy += line_h + 4
    surface.blit(font.render(f"scroll {int(page.scroll_top)}", True, TEXT_DIM), (x + pad, cy))
    cy += line_h
    surface.blit(font.render(f"passes {scheduler.passes}", True, TEXT_DIM), (x + pad, cy))
    cy += line_h + 8

    for binding in scheduler.bindings():
        status = binding.last_status
        text = status.status if status else "..."
        if status is not None and status.status in ("on", "off"):
            text = f"{status.status} {status.progress_label}"
        color = ERROR_COLOR if binding.error else TEXT_COLOR
        surface.blit(font.render(f"{binding.element}: {text}", True, color), (x + pad, cy))
        cy += line_h
