from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from cubefield.engine.errors import ContextUnavailable, SurfaceNotMounted
from cubefield.engine.state import SurfaceContext, ViewportState
from cubefield.utilities.logging import get_logger

if TYPE_CHECKING:
    from cubefield.host.target import RenderTarget

logger = get_logger(__name__)

MIN_PIXEL_RATIO = 1.0
MAX_PIXEL_RATIO = 1.5


def clamp_pixel_ratio(ratio: float | None) -> float:
    """Clamp a reported device pixel ratio into ``[1.0, 1.5]``.

    Missing or non-positive ratios count as ``1.0``.
    """
    if not ratio or ratio <= 0:
        return MIN_PIXEL_RATIO
    return min(MAX_PIXEL_RATIO, max(MIN_PIXEL_RATIO, ratio))


class SurfaceManager:
    """Own the drawing surface and keep its backing store sized to the target."""

    def __init__(self) -> None:
        self.target: RenderTarget | None = None
        self.viewport: ViewportState | None = None
        self._surface: pygame.Surface | None = None

    @property
    def is_initialized(self) -> bool:
        return self._surface is not None

    def initialize(self, target: RenderTarget | None) -> None:
        if target is None:
            raise SurfaceNotMounted("render target is not mounted")
        self.target = target
        self._surface = self._acquire(target)
        logger.info(
            "Acquired drawing surface %sx%s", *self._surface.get_size()
        )

    def resize(self) -> ViewportState:
        if self.target is None:
            raise SurfaceNotMounted("render target is not mounted")

        logical_width, logical_height = self.target.logical_size()
        pixel_ratio = clamp_pixel_ratio(self.target.device_pixel_ratio())
        viewport = ViewportState.from_logical(
            logical_width, logical_height, pixel_ratio
        )
        self.target.set_backing_size(viewport.backing_size)
        self._surface = self._acquire(self.target)
        self.viewport = viewport
        logger.debug(
            "Resized backing store to %sx%s (logical %sx%s @ %s)",
            viewport.backing_width,
            viewport.backing_height,
            viewport.logical_width,
            viewport.logical_height,
            viewport.pixel_ratio,
        )
        return viewport

    def current_context(self) -> SurfaceContext:
        if self._surface is None:
            raise ContextUnavailable("surface manager is not initialized")
        viewport = self.viewport or self.resize()
        return SurfaceContext(surface=self._surface, viewport=viewport)

    def release(self) -> None:
        self._surface = None
        self.viewport = None
        self.target = None

    @staticmethod
    def _acquire(target: RenderTarget) -> pygame.Surface:
        try:
            surface = target.get_context()
        except pygame.error as exc:
            raise ContextUnavailable(str(exc)) from exc
        if surface is None:
            raise ContextUnavailable(
                f"{type(target).__name__} has no drawing surface"
            )
        return surface
