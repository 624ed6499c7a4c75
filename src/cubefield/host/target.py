from __future__ import annotations

from abc import ABC, abstractmethod

import pygame
import reactivex
from reactivex.subject import Subject

from cubefield.utilities.env import Configuration
from cubefield.utilities.logging import get_logger

logger = get_logger(__name__)


class RenderTarget(ABC):
    """A rectangular region the engine draws into.

    Targets report their logical size and device pixel ratio, own the backing
    store and publish resize notifications on ``resize_events``.
    """

    def __init__(self) -> None:
        self._resized: Subject[tuple[float, float]] = Subject()

    @property
    def resize_events(self) -> reactivex.Observable[tuple[float, float]]:
        return self._resized

    def notify_resized(self, size: tuple[float, float]) -> None:
        logger.debug("Render target resized to %sx%s", *size)
        self._resized.on_next(size)

    @abstractmethod
    def logical_size(self) -> tuple[float, float]: ...

    @abstractmethod
    def device_pixel_ratio(self) -> float | None: ...

    @abstractmethod
    def set_backing_size(self, size: tuple[int, int]) -> None: ...

    @abstractmethod
    def get_context(self) -> pygame.Surface | None: ...


class OffscreenTarget(RenderTarget):
    """Headless target backed by a plain ``pygame.Surface``."""

    def __init__(
        self,
        width: float,
        height: float,
        pixel_ratio: float | None = 1.0,
    ) -> None:
        super().__init__()
        self._size = (width, height)
        self._pixel_ratio = pixel_ratio
        self._backing: pygame.Surface | None = None

    def logical_size(self) -> tuple[float, float]:
        return self._size

    def device_pixel_ratio(self) -> float | None:
        return self._pixel_ratio

    def set_backing_size(self, size: tuple[int, int]) -> None:
        if self._backing is not None and self._backing.get_size() == size:
            return
        self._backing = pygame.Surface(size)

    def get_context(self) -> pygame.Surface | None:
        if self._backing is None:
            # Nothing has sized the backing store yet; start from the logical size.
            self._backing = pygame.Surface(
                (int(self._size[0]), int(self._size[1]))
            )
        return self._backing

    def resize_to(
        self, width: float, height: float, pixel_ratio: float | None = None
    ) -> None:
        self._size = (width, height)
        if pixel_ratio is not None:
            self._pixel_ratio = pixel_ratio
        self.notify_resized(self._size)


class WindowTarget(RenderTarget):
    """Target filling the pygame display window.

    The engine draws into an off-screen backing store which ``present`` scales
    onto the window surface.
    """

    def __init__(self) -> None:
        super().__init__()
        self._backing: pygame.Surface | None = None

    def logical_size(self) -> tuple[float, float]:
        width, height = pygame.display.get_window_size()
        return float(width), float(height)

    def device_pixel_ratio(self) -> float | None:
        configured = Configuration.device_pixel_ratio()
        if configured is not None:
            return configured
        display = pygame.display.get_surface()
        window_width, _ = pygame.display.get_window_size()
        if display is None or window_width <= 0:
            return None
        return display.get_width() / window_width

    def set_backing_size(self, size: tuple[int, int]) -> None:
        if self._backing is not None and self._backing.get_size() == size:
            return
        self._backing = pygame.Surface(size)

    def get_context(self) -> pygame.Surface | None:
        if pygame.display.get_surface() is None:
            return None
        if self._backing is None:
            self._backing = pygame.Surface(pygame.display.get_surface().get_size())
        return self._backing

    def present(self) -> None:
        display = pygame.display.get_surface()
        if display is None or self._backing is None:
            return
        if self._backing.get_size() == display.get_size():
            display.blit(self._backing, (0, 0))
        else:
            display.blit(
                pygame.transform.smoothscale(self._backing, display.get_size()), (0, 0)
            )
        pygame.display.flip()
