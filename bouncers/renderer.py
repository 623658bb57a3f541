import numpy as np
from typing import Tuple, Optional
from dataclasses import dataclass
import logging
import os

os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
import pygame

import bouncers as B
from bouncers.config import Viewport
from bouncers.registry import BouncerRegistry
from bouncers.triggers import FrameTriggers, triggers_from_events

logger = logging.getLogger(__name__)


@dataclass
class AppearanceConfig:
    """Pixels only. Never feeds back into the simulation."""
    scale: int = B.PIXEL_SCALE
    dot_radius: int = B.DOT_RADIUS
    bg_color: Tuple[int, int, int] = B.BG_COLOR
    dot_color: Tuple[int, int, int] = B.DOT_COLOR
    average_color: Tuple[int, int, int] = B.AVERAGE_COLOR


class Renderer:
    """Maps swarm state → pixel frames. Viewport origin is the screen centre, y grows downward."""

    def __init__(self, viewport: Viewport, config: Optional[AppearanceConfig] = None):
        self.viewport = viewport
        self.config = config or AppearanceConfig()

    @property
    def size(self) -> Tuple[int, int]:
        s = self.config.scale
        w = int(self.viewport.max_x - self.viewport.min_x)
        h = int(self.viewport.max_y - self.viewport.min_y)
        return w * s, h * s

    def _world_to_pixel(self, x, y) -> Tuple[int, int]:
        s = self.config.scale
        px = int(float(x - self.viewport.min_x) * s)
        py = int(float(y - self.viewport.min_y) * s)
        return px, py

    def render(self, registry: BouncerRegistry,
               surface: Optional[pygame.Surface] = None) -> pygame.Surface:
        if surface is None:
            surface = pygame.Surface(self.size)
        surface.fill(self.config.bg_color)

        radius = max(1, self.config.dot_radius * self.config.scale)
        for bouncer in registry.others:
            pygame.draw.circle(surface, self.config.dot_color,
                               self._world_to_pixel(*bouncer.position), radius)
        if registry.distinguished is not None:
            pygame.draw.circle(surface, self.config.average_color,
                               self._world_to_pixel(*registry.distinguished.position), radius)
        return surface

    def render_array(self, registry: BouncerRegistry) -> np.ndarray:
        """Render single frame → (H, W, 3) uint8."""
        surface = self.render(registry)
        return pygame.surfarray.array3d(surface).transpose(1, 0, 2)


class Window(Renderer):
    """
    pygame window: trigger source and presenter in one, since both sit on
    the same event queue. Closing the window or pressing Q/ESC stops the host.
    """

    def __init__(self, viewport: Viewport, fps: int = B.FPS,
                 config: Optional[AppearanceConfig] = None,
                 caption: str = 'Bouncers'):
        super().__init__(viewport, config)
        self.fps = fps
        self.caption = caption
        self.screen = None
        self.clock = None
        self.running = False

    def open(self):
        pygame.init()
        self.screen = pygame.display.set_mode(self.size)
        pygame.display.set_caption(self.caption)
        self.clock = pygame.time.Clock()
        self.running = True
        logger.info("Window opened at %dx%d, %d fps", *self.size, self.fps)

    def poll(self, frame: int) -> FrameTriggers:
        triggers, quit_requested = triggers_from_events(pygame.event.get())
        if quit_requested:
            self.running = False
        return triggers

    def present(self, registry: BouncerRegistry) -> bool:
        if not self.running:
            return False
        self.render(registry, self.screen)
        pygame.display.flip()
        self.clock.tick(self.fps)
        return self.running

    def close(self):
        pygame.quit()
        self.running = False

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, *exc):
        self.close()
        return False


class HeadlessPresenter:
    """Presents nothing; stops the host after ``n_frames`` frames."""

    def __init__(self, n_frames: Optional[int] = None):
        self.n_frames = n_frames
        self.presented = 0

    def present(self, registry: BouncerRegistry) -> bool:
        self.presented += 1
        return self.n_frames is None or self.presented < self.n_frames
