from pathlib import Path
from typing import Annotated, Optional

import pygame
import typer

from cubefield.engine.animation_loop import AnimationLoop
from cubefield.host.scheduler import FrameScheduler
from cubefield.host.target import OffscreenTarget
from cubefield.runtime.container import build_engine_container
from cubefield.runtime.frame_exporter import FrameExporter
from cubefield.utilities.env import Configuration
from cubefield.utilities.logging import get_logger

logger = get_logger(__name__)

FRAME_FILENAME = "frame_{index:05d}.png"


def render_command(
    output_dir: Annotated[
        Path, typer.Option("--output-dir", file_okay=False, help="Directory for PNG frames")
    ],
    frames: Annotated[int, typer.Option("--frames", min=1)] = 1,
    width: Annotated[Optional[int], typer.Option("--width", min=1)] = None,
    height: Annotated[Optional[int], typer.Option("--height", min=1)] = None,
    pixel_ratio: Annotated[float, typer.Option("--pixel-ratio", min=0.1)] = 1.0,
) -> None:
    """Render consecutive frames headlessly and write them as PNG files."""

    default_width, default_height = Configuration.window_size()
    output_dir.mkdir(parents=True, exist_ok=True)

    pygame.init()
    resolver = build_engine_container()
    scheduler = resolver.resolve(FrameScheduler)
    loop = resolver.resolve(AnimationLoop)
    exporter = resolver.resolve(FrameExporter)
    target = OffscreenTarget(
        width or default_width, height or default_height, pixel_ratio=pixel_ratio
    )

    try:
        # start() paints the first frame; every scheduler run paints the next.
        if not loop.start(target):
            logger.error("AnimationLoop did not start; nothing to render")
            raise typer.Exit(code=1)
        for index in range(frames):
            if index > 0:
                scheduler.run_frame()
            if not loop.running:
                logger.error("AnimationLoop stopped after %s frames", index)
                raise typer.Exit(code=1)
            surface = loop.surface_manager.current_context().surface
            path = output_dir / FRAME_FILENAME.format(index=index)
            exporter.save(surface, path)
        logger.info("Rendered %s frames into %s", frames, output_dir)
    finally:
        loop.stop()
        pygame.quit()
