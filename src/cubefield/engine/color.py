from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pygame

from cubefield.engine.wave import AMPLITUDE


@dataclass(frozen=True)
class HSLColor:
    """Hue in degrees, saturation and lightness in percent."""

    hue: float
    saturation: float
    lightness: float

    def to_pygame(self) -> pygame.Color:
        color = pygame.Color(0, 0, 0)
        color.hsla = (self.hue % 360.0, self.saturation, self.lightness, 100.0)
        return color


NEAR_TOP_COLOR = HSLColor(344.69, 45.0, 32.0)  # burgundy
FAR_TOP_COLOR = HSLColor(220.0, 50.0, 28.0)  # blue
LEFT_FACE_COLOR = HSLColor(202.94, 85.0, 22.0)
RIGHT_FACE_COLOR = HSLColor(202.94, 90.0, 38.0)
BACKGROUND_COLOR = HSLColor(210.0, 60.0, 25.0)


def _lerp(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def lerp_top_color(t: float) -> HSLColor:
    """Blend the top-face color from burgundy (``t=0``) to blue (``t=1``)."""

    t = min(max(t, 0.0), 1.0)
    return HSLColor(
        hue=_lerp(NEAR_TOP_COLOR.hue, FAR_TOP_COLOR.hue, t),
        saturation=_lerp(NEAR_TOP_COLOR.saturation, FAR_TOP_COLOR.saturation, t),
        lightness=_lerp(NEAR_TOP_COLOR.lightness, FAR_TOP_COLOR.lightness, t),
    )


def blend_factor(offset: float, amplitude: float = AMPLITUDE) -> float:
    return min(max((offset + amplitude) / (2 * amplitude), 0.0), 1.0)


def blend_factors(offsets: np.ndarray, amplitude: float = AMPLITUDE) -> np.ndarray:
    return np.clip((offsets + amplitude) / (2 * amplitude), 0.0, 1.0)
