import math

import numpy as np

AMPLITUDE = 25.0
COLUMN_PHASE_STEP = 0.5


def wave_offset(column: int, phase: float) -> float:
    """Vertical displacement of ``column`` in logical pixels.

    Neighbouring columns are staggered by ``COLUMN_PHASE_STEP`` radians so the
    crest travels across the grid.
    """
    return AMPLITUDE * math.sin(phase + column * COLUMN_PHASE_STEP)


def column_offsets(columns: np.ndarray, phase: float) -> np.ndarray:
    return AMPLITUDE * np.sin(phase + columns * COLUMN_PHASE_STEP)
