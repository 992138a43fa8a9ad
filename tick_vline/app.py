"""V-line glyph row - pygame host.

Click anywhere to toggle the next glyph.

Controls:
  Click   Toggle the current glyph
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from tick_vline.config import VLineConfig
from tick_vline.constants import FPS, SCREEN_H, SCREEN_W
from tick_vline.pygame_sink import PygameSink
from tick_vline.renderer import Renderer

log = logging.getLogger(__name__)


class Stage:
    """Owns the window surface and redraws the glyph row on request."""

    def __init__(self, surface: pygame.Surface) -> None:
        width, height = surface.get_size()
        self.renderer = Renderer(VLineConfig.from_surface(width, height))
        self.sink = PygameSink(surface)
        self.dirty = True

    def request_redraw(self) -> None:
        self.dirty = True

    def handle_tap(self) -> None:
        self.renderer.on_interaction(self.request_redraw)

    def present(self) -> None:
        if not self.dirty:
            return
        self.renderer.render(self.sink)
        pygame.display.flip()
        self.dirty = False


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
        pygame.display.set_caption("tick-vline")
        clock = pygame.time.Clock()
        stage = Stage(screen)
        log.info("stage ready: %dx%d", SCREEN_W, SCREEN_H)

        running = True
        while running:
            elapsed_ms = clock.tick(FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    stage.handle_tap()

            stage.renderer.loop.advance(elapsed_ms)
            stage.present()
    finally:
        pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
