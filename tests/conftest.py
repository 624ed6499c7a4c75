import os
from typing import Callable

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest
from hypothesis import HealthCheck, settings
from reactivex.disposable import Disposable

from cubefield.host.scheduler import FrameScheduler
from cubefield.host.target import OffscreenTarget

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


class _LeakyScheduler:
    """Scheduler whose cancelled callbacks may still fire once, like some hosts."""

    def __init__(self) -> None:
        self.requested: list[Callable[[], None]] = []
        self.cancelled = 0

    def request_frame(self, callback: Callable[[], None]) -> Disposable:
        self.requested.append(callback)

        def _cancel() -> None:
            self.cancelled += 1

        return Disposable(_cancel)

    def fire_all(self) -> None:
        requested, self.requested = self.requested, []
        for callback in requested:
            callback()


@pytest.fixture(autouse=True, scope="session")
def configure_sdl_video_driver() -> None:
    """Force pygame to use the dummy SDL driver so headless tests remain stable."""

    patcher = pytest.MonkeyPatch()
    patcher.setenv("SDL_VIDEODRIVER", "dummy")
    try:
        yield
    finally:
        patcher.undo()


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def scheduler() -> FrameScheduler:
    return FrameScheduler()


@pytest.fixture
def leaky_scheduler() -> _LeakyScheduler:
    return _LeakyScheduler()


@pytest.fixture
def offscreen_target() -> OffscreenTarget:
    return OffscreenTarget(220, 120, pixel_ratio=1.0)
