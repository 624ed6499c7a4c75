import os

from cubefield.utilities.env.enums import FrameExportStrategy
from cubefield.utilities.env.parsing import _env_int

DEFAULT_MAX_FPS = 60
DEFAULT_FRAME_EXPORT_STRATEGY = FrameExportStrategy.BUFFER


class RenderingConfiguration:
    @classmethod
    def max_fps(cls) -> int:
        return _env_int("CUBEFIELD_MAX_FPS", default=DEFAULT_MAX_FPS, minimum=1)

    @classmethod
    def frame_export_strategy(cls) -> FrameExportStrategy:
        strategy = os.environ.get(
            "CUBEFIELD_FRAME_EXPORT_STRATEGY", DEFAULT_FRAME_EXPORT_STRATEGY
        ).strip().lower()
        try:
            return FrameExportStrategy(strategy)
        except ValueError as exc:
            raise ValueError(
                "CUBEFIELD_FRAME_EXPORT_STRATEGY must be 'buffer' or 'array'"
            ) from exc
