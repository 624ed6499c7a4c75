from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame

    from cubefield.engine.color import HSLColor

PHASE_INCREMENT = 0.008


@dataclass(frozen=True)
class ViewportState:
    """Logical and backing-store dimensions of the drawing surface."""

    logical_width: float
    logical_height: float
    pixel_ratio: float
    backing_width: int
    backing_height: int

    @classmethod
    def from_logical(
        cls, logical_width: float, logical_height: float, pixel_ratio: float
    ) -> ViewportState:
        return cls(
            logical_width=logical_width,
            logical_height=logical_height,
            pixel_ratio=pixel_ratio,
            backing_width=int(logical_width * pixel_ratio),
            backing_height=int(logical_height * pixel_ratio),
        )

    @property
    def backing_size(self) -> tuple[int, int]:
        return self.backing_width, self.backing_height


@dataclass(frozen=True)
class GridSpec:
    cube_width: float
    cube_height: float
    cube_depth: float
    spacing_x: float
    spacing_y: float
    columns: int
    rows: int


@dataclass
class AnimationClock:
    """Frame-count driven animation phase."""

    phase: float = 0.0
    increment: float = PHASE_INCREMENT

    def advance(self) -> float:
        self.phase += self.increment
        return self.phase


@dataclass(frozen=True)
class CubeInstance:
    row: int
    column: int
    origin_x: float
    origin_y: float
    top_color: HSLColor


@dataclass(frozen=True)
class SurfaceContext:
    surface: pygame.Surface
    viewport: ViewportState
