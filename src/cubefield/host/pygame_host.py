from __future__ import annotations

import pygame

from cubefield.host.scheduler import FrameScheduler
from cubefield.host.target import WindowTarget
from cubefield.utilities.env import Configuration
from cubefield.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_CAPTION = "cubefield"


class PygameHost:
    """Resizable pygame window that drives a ``FrameScheduler``."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        target: WindowTarget | None = None,
        max_fps: int | None = None,
    ) -> None:
        self.scheduler = scheduler
        self.target = target or WindowTarget()
        self.max_fps = max_fps or Configuration.max_fps()
        self.clock: pygame.time.Clock | None = None
        self.running = False

    def open(self, size: tuple[int, int] | None = None) -> WindowTarget:
        size = size or Configuration.window_size()
        pygame.init()
        logger.info("Opening %sx%s window", *size)
        pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_CAPTION)
        self.clock = pygame.time.Clock()
        return self.target

    def handle_events(self) -> bool:
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                self.target.notify_resized((float(event.w), float(event.h)))
        return running

    def run(self, max_frames: int | None = None) -> int:
        if self.clock is None:
            raise RuntimeError("PygameHost window is not open")
        self.running = True
        frames = 0
        logger.info("Entering host loop at %s fps", self.max_fps)
        try:
            while self.running:
                self.running = self.handle_events()
                self.scheduler.run_frame()
                self.target.present()
                self.clock.tick(self.max_fps)
                frames += 1
                if max_frames is not None and frames >= max_frames:
                    break
        finally:
            self.running = False
        return frames

    def close(self) -> None:
        pygame.quit()
