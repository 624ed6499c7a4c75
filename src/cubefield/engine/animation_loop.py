from __future__ import annotations

import time
from functools import partial
from typing import TYPE_CHECKING, Callable

import pygame
from reactivex.abc import DisposableBase

from cubefield.engine.color import (BACKGROUND_COLOR, LEFT_FACE_COLOR,
                                    RIGHT_FACE_COLOR, HSLColor)
from cubefield.engine.cube import draw_cube
from cubefield.engine.errors import ContextUnavailable, SurfaceNotMounted
from cubefield.engine.grid import iter_cube_instances, plan
from cubefield.engine.state import AnimationClock, SurfaceContext
from cubefield.engine.surface_manager import SurfaceManager
from cubefield.utilities.logging import get_logger

if TYPE_CHECKING:
    from cubefield.host.target import RenderTarget

logger = get_logger(__name__)

FrameRequester = Callable[[Callable[[], None]], DisposableBase]


def render_frame(context: SurfaceContext, phase: float) -> int:
    """Paint one full frame of the cube field and return the cube count."""

    surface, viewport = context.surface, context.viewport
    surface.fill(BACKGROUND_COLOR.to_pygame())
    if viewport.logical_width <= 0 or viewport.logical_height <= 0:
        # Collapsed target; keep ticking until a resize gives it an area.
        return 0

    grid = plan(viewport)
    left = LEFT_FACE_COLOR.to_pygame()
    right = RIGHT_FACE_COLOR.to_pygame()
    top_colors: dict[HSLColor, pygame.Color] = {}
    drawn = 0
    for cube in iter_cube_instances(grid, phase):
        if cube.top_color not in top_colors:
            top_colors[cube.top_color] = cube.top_color.to_pygame()
        draw_cube(
            surface,
            cube.origin_x,
            cube.origin_y,
            grid.cube_width,
            grid.cube_height,
            grid.cube_depth,
            top_colors[cube.top_color],
            left,
            right,
            scale=viewport.pixel_ratio,
        )
        drawn += 1
    return drawn


class AnimationLoop:
    """Drive the cube field from a host frame scheduler.

    The loop is either idle or running. Every ``start`` after a ``stop`` opens
    a new generation; ticks from an older generation return without drawing.
    """

    def __init__(
        self,
        request_frame: FrameRequester,
        surface_manager: SurfaceManager | None = None,
    ) -> None:
        self._request_frame = request_frame
        self.surface_manager = surface_manager or SurfaceManager()
        self.clock: AnimationClock | None = None
        self.running = False
        self.generation = 0
        self._frame_handle: DisposableBase | None = None
        self._resize_subscription: DisposableBase | None = None

    @property
    def has_pending_frame(self) -> bool:
        return self._frame_handle is not None

    def start(self, target: RenderTarget | None) -> bool:
        if self.running:
            logger.debug("AnimationLoop already running; ignoring start")
            return True
        if target is None:
            raise SurfaceNotMounted("cannot start before the render target exists")

        try:
            self.surface_manager.initialize(target)
        except ContextUnavailable as exc:
            logger.warning("Background disabled, no drawing context: %s", exc)
            return False
        self.surface_manager.resize()
        self._resize_subscription = target.resize_events.subscribe(
            on_next=self._on_resize
        )

        self.clock = AnimationClock()
        self.generation += 1
        self.running = True
        logger.info("Starting AnimationLoop generation %s", self.generation)
        self._tick(self.generation)
        return self.running

    def stop(self) -> None:
        # Cancel the next tick before unsubscribing so nothing reschedules.
        if self._frame_handle is not None:
            self._frame_handle.dispose()
            self._frame_handle = None
        if self._resize_subscription is not None:
            self._resize_subscription.dispose()
            self._resize_subscription = None
        if not self.running:
            return

        self.running = False
        self.clock = None
        self.surface_manager.release()
        logger.info("Stopped AnimationLoop generation %s", self.generation)

    def _on_resize(self, _size: tuple[float, float]) -> None:
        if not self.running:
            return
        try:
            self.surface_manager.resize()
        except Exception:
            logger.exception("Resize failed; stopping AnimationLoop")
            self.stop()

    def _tick(self, generation: int) -> None:
        clock = self.clock
        if not self.running or generation != self.generation or clock is None:
            return
        self._frame_handle = None

        start_ns = time.perf_counter_ns()
        try:
            drawn = render_frame(self.surface_manager.current_context(), clock.phase)
        except Exception:
            logger.exception("Frame failed; stopping AnimationLoop")
            self.stop()
            return
        duration_ms = (time.perf_counter_ns() - start_ns) / 1_000_000
        logger.debug(
            "engine.frame",
            extra={
                "phase": clock.phase,
                "cubes": drawn,
                "duration_ms": duration_ms,
            },
        )

        clock.advance()
        self._frame_handle = self._request_frame(partial(self._tick, generation))
