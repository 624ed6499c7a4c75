import pygame
import pytest

from cubefield.engine.errors import ContextUnavailable, SurfaceNotMounted
from cubefield.engine.surface_manager import SurfaceManager, clamp_pixel_ratio
from cubefield.host.target import OffscreenTarget


class _NoContextTarget(OffscreenTarget):
    def get_context(self) -> pygame.Surface | None:
        return None


class _BrokenTarget(OffscreenTarget):
    def get_context(self) -> pygame.Surface | None:
        raise pygame.error("video system not initialized")


class TestClampPixelRatio:
    @pytest.mark.parametrize(
        ("reported", "expected"),
        [(1, 1.0), (2, 1.5), (3, 1.5), (5, 1.5), (1.25, 1.25)],
        ids=["one", "two", "three", "five", "fractional"],
    )
    def test_ratio_is_capped(self, reported: float, expected: float) -> None:
        assert clamp_pixel_ratio(reported) == expected

    @pytest.mark.parametrize("reported", [None, 0, -2, 0.5], ids=["none", "zero", "negative", "half"])
    def test_ratio_floor_is_one(self, reported: float | None) -> None:
        assert clamp_pixel_ratio(reported) == 1.0


class TestSurfaceManager:
    """Exercise surface acquisition and backing-store sizing."""

    def test_initialize_requires_mounted_target(self) -> None:
        with pytest.raises(SurfaceNotMounted):
            SurfaceManager().initialize(None)

    def test_initialize_reports_missing_context(self) -> None:
        manager = SurfaceManager()

        with pytest.raises(ContextUnavailable):
            manager.initialize(_NoContextTarget(100, 100))
        assert not manager.is_initialized

    def test_initialize_wraps_pygame_errors(self) -> None:
        with pytest.raises(ContextUnavailable, match="video system"):
            SurfaceManager().initialize(_BrokenTarget(100, 100))

    @pytest.mark.parametrize(
        ("ratio", "expected_ratio", "backing"),
        [
            (1.0, 1.0, (800, 600)),
            (2.0, 1.5, (1200, 900)),
            (3.0, 1.5, (1200, 900)),
            (5.0, 1.5, (1200, 900)),
        ],
        ids=["1x", "2x", "3x", "5x"],
    )
    def test_resize_sizes_backing_store(
        self, ratio: float, expected_ratio: float, backing: tuple[int, int]
    ) -> None:
        manager = SurfaceManager()
        manager.initialize(OffscreenTarget(800, 600, pixel_ratio=ratio))

        viewport = manager.resize()

        assert viewport.pixel_ratio == expected_ratio
        assert viewport.backing_size == backing
        assert manager.current_context().surface.get_size() == backing
        assert manager.current_context().viewport is viewport

    def test_resize_follows_target_size(self) -> None:
        target = OffscreenTarget(800, 600, pixel_ratio=1.0)
        manager = SurfaceManager()
        manager.initialize(target)
        manager.resize()

        target.resize_to(333.5, 200, pixel_ratio=1.5)
        viewport = manager.resize()

        assert (viewport.logical_width, viewport.logical_height) == (333.5, 200)
        assert viewport.backing_size == (500, 300)
        assert manager.current_context().surface.get_size() == (500, 300)

    def test_current_context_before_initialize_fails(self) -> None:
        with pytest.raises(ContextUnavailable):
            SurfaceManager().current_context()

    def test_current_context_sizes_lazily(self) -> None:
        manager = SurfaceManager()
        manager.initialize(OffscreenTarget(40, 30, pixel_ratio=1.0))

        context = manager.current_context()

        assert context.viewport.backing_size == (40, 30)

    def test_release_forgets_surface(self) -> None:
        manager = SurfaceManager()
        manager.initialize(OffscreenTarget(40, 30))
        manager.release()

        assert manager.viewport is None
        with pytest.raises(ContextUnavailable):
            manager.current_context()
