from typing import Annotated, Optional

import typer

from cubefield.engine.animation_loop import AnimationLoop
from cubefield.host.pygame_host import PygameHost
from cubefield.runtime.container import build_engine_container
from cubefield.utilities.env import Configuration
from cubefield.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command(
    width: Annotated[Optional[int], typer.Option("--width", min=1)] = None,
    height: Annotated[Optional[int], typer.Option("--height", min=1)] = None,
    max_fps: Annotated[
        Optional[int],
        typer.Option("--max-fps", min=1, help="Frame cap, defaults to CUBEFIELD_MAX_FPS"),
    ] = None,
) -> None:
    """Animate the cube field in a resizable window until it is closed."""

    default_width, default_height = Configuration.window_size()
    resolver = build_engine_container()
    host = resolver.resolve(PygameHost)
    if max_fps is not None:
        host.max_fps = max_fps
    loop = resolver.resolve(AnimationLoop)

    target = host.open((width or default_width, height or default_height))
    try:
        if not loop.start(target):
            logger.error("AnimationLoop did not start; nothing to animate")
            raise typer.Exit(code=1)
        host.run()
    finally:
        loop.stop()
        host.close()
