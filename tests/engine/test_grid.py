import math
from dataclasses import astuple

import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cubefield.engine.color import FAR_TOP_COLOR, NEAR_TOP_COLOR
from cubefield.engine.grid import (cell_origin, column_range, iter_cube_instances,
                                   plan, row_range)
from cubefield.engine.state import GridSpec, ViewportState
from cubefield.engine.wave import AMPLITUDE


def _viewport(width: float, height: float, ratio: float = 1.0) -> ViewportState:
    return ViewportState.from_logical(width, height, ratio)


def _uncovered_points(
    grid: GridSpec,
    footprints: np.ndarray,
    width: float,
    height: float,
    samples: int = 48,
) -> np.ndarray:
    """Return sample points of the viewport outside every cube's bounding box.

    ``footprints`` rows are ``(centre_x, top_y)`` pairs.
    """
    xs, ys = np.meshgrid(np.linspace(0, width, samples), np.linspace(0, height, samples))
    points = np.stack((xs.ravel(), ys.ravel()), axis=-1)

    left = footprints[:, 0] - grid.cube_width / 2
    right = footprints[:, 0] + grid.cube_width / 2
    top = footprints[:, 1]
    bottom = footprints[:, 1] + grid.cube_height + grid.cube_depth

    px = points[:, 0][:, None]
    py = points[:, 1][:, None]
    eps = 1e-6
    covered = (
        (px >= left - eps) & (px <= right + eps) & (py >= top - eps) & (py <= bottom + eps)
    ).any(axis=1)
    return points[~covered]


class TestPlan:
    """Check the tessellation parameters derived from the viewport."""

    def test_plan_for_1100_wide_viewport(self) -> None:
        grid = plan(_viewport(1100, 600))

        assert grid.cube_width == pytest.approx(200)
        assert grid.cube_height == pytest.approx(100)
        assert grid.cube_depth == pytest.approx(64)
        assert grid.spacing_x == pytest.approx(200)
        assert grid.spacing_y == pytest.approx(114)
        assert grid.columns == 9
        assert grid.rows == math.ceil(600 / grid.spacing_y) + 4

    @given(
        width=st.floats(min_value=1.0, max_value=8000.0),
        height=st.floats(min_value=1.0, max_value=8000.0),
    )
    def test_plan_invariants(self, width: float, height: float) -> None:
        grid = plan(_viewport(width, height))

        assert grid.cube_height == pytest.approx(0.5 * grid.cube_width)
        assert grid.cube_depth == pytest.approx(0.32 * grid.cube_width)
        assert grid.spacing_x == grid.cube_width
        assert grid.spacing_y == pytest.approx(grid.cube_height / 2 + grid.cube_depth)
        assert grid.columns == math.ceil(width / grid.spacing_x) + 3
        assert grid.rows == math.ceil(height / grid.spacing_y) + 4

    def test_plan_ignores_pixel_ratio(self) -> None:
        assert plan(_viewport(800, 600, 1.0)) == plan(_viewport(800, 600, 1.5))

    def test_iteration_ranges_include_overscan(self) -> None:
        grid = plan(_viewport(1100, 600))

        assert column_range(grid) == range(-1, 9)
        assert row_range(grid)[0] == -2
        assert row_range(grid)[-1] == grid.rows - 1


class TestCellOrigin:
    def test_even_rows_are_not_shifted(self) -> None:
        grid = plan(_viewport(1100, 600))

        assert cell_origin(grid, 0, 0) == pytest.approx((-100.0, -100.0))
        assert cell_origin(grid, 2, 1) == pytest.approx((100.0, 2 * 114.0 - 100.0))

    @pytest.mark.parametrize("row", [-1, 1, 3], ids=["negative-odd", "one", "three"])
    def test_odd_rows_shift_half_a_cube(self, row: int) -> None:
        grid = plan(_viewport(1100, 600))

        x, _ = cell_origin(grid, row, 0)

        assert x == pytest.approx(0.0)


class TestIterCubeInstances:
    """Cover painter's order and per-column state of the generated cubes."""

    def test_rows_are_emitted_back_to_front(self) -> None:
        grid = plan(_viewport(440, 200))

        cubes = list(iter_cube_instances(grid, 0.0))
        rows = [cube.row for cube in cubes]

        assert rows == sorted(rows)
        assert len(cubes) == len(row_range(grid)) * len(column_range(grid))
        assert [c.column for c in cubes if c.row == 0] == list(column_range(grid))

    def test_wave_offset_and_color_depend_on_column_only(self) -> None:
        grid = plan(_viewport(440, 200))
        phase = 1.0

        cubes = list(iter_cube_instances(grid, phase))
        by_column = {}
        for cube in cubes:
            _, base_y = cell_origin(grid, cube.row, cube.column)
            key = (round(cube.origin_y - base_y, 9), cube.top_color)
            by_column.setdefault(cube.column, set()).add(key)

        assert all(len(states) == 1 for states in by_column.values())
        offset, _ = next(iter(by_column[0]))
        assert offset == pytest.approx(AMPLITUDE * math.sin(phase))

    def test_crest_is_blue_and_trough_is_burgundy(self) -> None:
        grid = plan(_viewport(440, 200))
        # Column 0 sits at +amplitude when the phase is pi / 2.
        crest = next(
            c for c in iter_cube_instances(grid, math.pi / 2) if c.column == 0
        )
        trough = next(
            c for c in iter_cube_instances(grid, -math.pi / 2) if c.column == 0
        )

        assert astuple(crest.top_color) == pytest.approx(astuple(FAR_TOP_COLOR))
        assert trough.top_color == NEAR_TOP_COLOR


class TestCoverage:
    """The rendered footprints must leave no holes in the visible rectangle."""

    @settings(deadline=None)
    @given(
        width=st.floats(min_value=320.0, max_value=3840.0),
        height=st.floats(min_value=100.0, max_value=2160.0),
        phase=st.floats(min_value=0.0, max_value=2 * math.pi),
    )
    def test_wave_frame_covers_viewport(
        self, width: float, height: float, phase: float
    ) -> None:
        grid = plan(_viewport(width, height))
        footprints = np.array(
            [(c.origin_x, c.origin_y) for c in iter_cube_instances(grid, phase)]
        )

        assert _uncovered_points(grid, footprints, width, height).size == 0

    @pytest.mark.parametrize("displacement", [-AMPLITUDE, AMPLITUDE], ids=["low", "high"])
    @pytest.mark.parametrize(
        "size", [(320, 240), (1100, 600), (1920, 1080)], ids=["small", "medium", "hd"]
    )
    def test_uniform_maximum_displacement_covers_viewport(
        self, displacement: float, size: tuple[int, int]
    ) -> None:
        width, height = size
        grid = plan(_viewport(width, height))
        footprints = np.array(
            [
                (x, y + displacement)
                for row in row_range(grid)
                for x, y in (cell_origin(grid, row, col) for col in column_range(grid))
            ]
        )

        assert _uncovered_points(grid, footprints, width, height).size == 0
