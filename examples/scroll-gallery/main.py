"""Scroll Gallery - scroll-driven keyframe animations in a pygame window.

Exercises parallax and parallax-css: keyframes come from animations.css,
every box is bound with an animation attribute, and the scheduler runs at
most one pass per frame no matter how many scroll events arrive.

Controls:
  Wheel / Up / Down   Scroll
  PgUp / PgDn         Scroll a screen
  Home / End          Jump to top / bottom
  R                   Reinitialize every binding (reloads animations.css)
  Esc                 Quit
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import pygame

from parallax import AnimationRepository, ParallaxScheduler
from parallax_css import FileStylesheetSource

from game.layout import SECTIONS
from game.page import GalleryPage
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W, SCROLL_STEP
from ui.render import draw_page, draw_sidebar

CSS_PATH = Path(__file__).parent / "game" / "animations.css"


class GalleryState:
    """Page, repository and scheduler for one window."""

    def __init__(self, viewport_height: float) -> None:
        self.page = GalleryPage(viewport_height)
        self.repository = AnimationRepository([FileStylesheetSource(CSS_PATH)])
        self.scheduler = ParallaxScheduler(self.page, self.repository)
        for section in SECTIONS:
            for box in section.boxes:
                self.scheduler.bind(box.element, box.attribute)

    def scroll_by(self, delta: float) -> None:
        self.page.scroll_by(delta)
        self.scheduler.notify()

    def resize(self, height: float) -> None:
        self.page.resize(height)
        self.scheduler.notify(force=True)

    def reload(self) -> None:
        self.repository.clear()
        for binding in self.scheduler.bindings():
            self.scheduler.reinitialize(binding.element)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), pygame.RESIZABLE)
    pygame.display.set_caption("Scroll Gallery - parallax demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GalleryState(SCREEN_H)
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.MOUSEWHEEL:
                state.scroll_by(-event.y * SCROLL_STEP)

            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                state.resize(event.h)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_DOWN:
                    state.scroll_by(SCROLL_STEP)
                elif event.key == pygame.K_UP:
                    state.scroll_by(-SCROLL_STEP)
                elif event.key == pygame.K_PAGEDOWN:
                    state.scroll_by(state.page.viewport_height)
                elif event.key == pygame.K_PAGEUP:
                    state.scroll_by(-state.page.viewport_height)
                elif event.key == pygame.K_HOME:
                    state.scroll_by(-state.page.max_scroll)
                elif event.key == pygame.K_END:
                    state.scroll_by(state.page.max_scroll)
                elif event.key == pygame.K_r:
                    state.reload()

        # --- One pass per frame ---
        state.scheduler.frame()

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_page(screen, state.page, font)
        draw_sidebar(screen, state.scheduler, state.page, font)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
