# MIT License (see LICENSE)
"""
Interactive pygame window.

Requires the optional `viewer` extra (pip install verlet-cloth[viewer]).
Screen coordinates map one-to-one to world coordinates (pixels, y down),
so no conversion is needed between the simulation and the window.
"""
from __future__ import annotations

import pygame

from .adapter import FrameBackend, PointerState


class PygameBackend(FrameBackend):
    """
    Resizable pygame window with mouse input.

    Colours follow a dark theme: grey links, white particles, dark grey
    text on a black background.
    """

    BACKGROUND = (0, 0, 0)
    LINK_COLOR = (130, 130, 130)
    PARTICLE_COLOR = (255, 255, 255)
    TEXT_COLOR = (80, 80, 80)

    def __init__(
        self,
        size: tuple[int, int] = (800, 600),
        title: str = "Cloth",
        fps: int = 60,
        line_width: int = 5,
    ):
        pygame.init()
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.line_width = line_width
        self._fonts: dict[int, pygame.font.Font] = {}
        self._closed = False
        self._cleared = False

    def _font(self, size: int) -> pygame.font.Font:
        """Fonts are cached per size."""
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _ensure_cleared(self) -> None:
        if not self._cleared:
            self.screen.fill(self.BACKGROUND)
            self._cleared = True

    def get_display_size(self) -> tuple[float, float]:
        w, h = self.screen.get_size()
        return float(w), float(h)

    def get_pointer_state(self) -> PointerState:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._closed = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self._closed = True
        x, y = pygame.mouse.get_pos()
        down = pygame.mouse.get_pressed()[0]
        return (float(x), float(y)), bool(down)

    def draw_segment(self, p1, p2) -> None:
        self._ensure_cleared()
        pygame.draw.line(
            self.screen, self.LINK_COLOR,
            (int(p1[0]), int(p1[1])), (int(p2[0]), int(p2[1])),
            self.line_width,
        )

    def draw_point(self, p, radius) -> None:
        self._ensure_cleared()
        pygame.draw.circle(self.screen, self.PARTICLE_COLOR, (int(p[0]), int(p[1])), max(1, int(radius)))

    def draw_text(self, s, x, y, size) -> None:
        self._ensure_cleared()
        surface = self._font(int(size)).render(s, True, self.TEXT_COLOR)
        self.screen.blit(surface, (int(x), int(y)))

    def present_frame(self) -> None:
        self._ensure_cleared()
        pygame.display.flip()
        self._cleared = False
        self.clock.tick(self.fps)

    def should_close(self) -> bool:
        return self._closed

    def close(self) -> None:
        pygame.quit()
