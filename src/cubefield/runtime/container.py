from __future__ import annotations

from typing import Any, Mapping

from lagom import Container, Singleton

from cubefield.engine.animation_loop import AnimationLoop
from cubefield.engine.surface_manager import SurfaceManager
from cubefield.host.pygame_host import PygameHost
from cubefield.host.scheduler import FrameScheduler
from cubefield.runtime.frame_exporter import FrameExporter
from cubefield.utilities.logging import get_logger

EngineContainer = Container

logger = get_logger(__name__)


def build_engine_container(
    overrides: Mapping[type[Any], object] | None = None,
) -> EngineContainer:
    container = Container()
    logger.debug("Created Lagom container for engine configuration.")
    configure_engine_container(container=container, overrides=overrides)
    return container


def configure_engine_container(
    *,
    container: EngineContainer,
    overrides: Mapping[type[Any], object] | None = None,
) -> None:
    _bind(container, overrides, FrameScheduler, Singleton(FrameScheduler))
    _bind(container, overrides, SurfaceManager, Singleton(SurfaceManager))
    _bind(container, overrides, FrameExporter, Singleton(FrameExporter))
    _bind(
        container,
        overrides,
        AnimationLoop,
        Singleton(
            lambda resolver: AnimationLoop(
                request_frame=resolver[FrameScheduler].request_frame,
                surface_manager=resolver[SurfaceManager],
            )
        ),
    )
    _bind(
        container,
        overrides,
        PygameHost,
        Singleton(lambda resolver: PygameHost(scheduler=resolver[FrameScheduler])),
    )


def _bind(
    container: EngineContainer,
    overrides: Mapping[type[Any], object] | None,
    key: type[Any],
    value: object,
) -> None:
    if overrides and key in overrides:
        container[key] = overrides[key]
        logger.debug("Applied Lagom override for %s.", key)
        return
    container[key] = value
