from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pygame
from PIL import Image

from cubefield.utilities.env import Configuration, FrameExportStrategy
from cubefield.utilities.logging import get_logger

logger = get_logger(__name__)

FRAME_IMAGE_MODE = "RGBA"


class FrameExporter:
    """Turn the engine's backing store into PIL images and frame files."""

    def __init__(
        self,
        strategy_provider: Callable[[], FrameExportStrategy] | None = None,
    ) -> None:
        self._strategy_provider = (
            strategy_provider or Configuration.frame_export_strategy
        )

    def export(self, backing: pygame.Surface) -> Image.Image:
        match self._strategy_provider():
            case FrameExportStrategy.ARRAY:
                # surfarray is column-major; PIL wants rows first.
                pixels = pygame.surfarray.array3d(backing).swapaxes(0, 1)
                return Image.fromarray(pixels)
            case _:
                return Image.frombytes(
                    FRAME_IMAGE_MODE,
                    backing.get_size(),
                    pygame.image.tobytes(backing, FRAME_IMAGE_MODE),
                )

    def save(self, backing: pygame.Surface, path: Path) -> Path:
        self.export(backing).save(path)
        logger.debug("Wrote %s", path)
        return path
