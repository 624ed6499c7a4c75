from cubefield.utilities.env.parsing import _env_int, _env_optional_float

DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 720


class WindowConfiguration:
    @classmethod
    def window_size(cls) -> tuple[int, int]:
        return (
            _env_int("CUBEFIELD_WINDOW_WIDTH", default=DEFAULT_WINDOW_WIDTH, minimum=1),
            _env_int(
                "CUBEFIELD_WINDOW_HEIGHT", default=DEFAULT_WINDOW_HEIGHT, minimum=1
            ),
        )

    @classmethod
    def device_pixel_ratio(cls) -> float | None:
        """Pixel ratio reported by window targets, ``None`` to ask the display."""

        return _env_optional_float(
            "CUBEFIELD_DEVICE_PIXEL_RATIO", exclusive_minimum=0.0
        )
