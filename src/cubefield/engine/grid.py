from __future__ import annotations

import math
from collections.abc import Iterator

import numpy as np

from cubefield.engine.color import blend_factors, lerp_top_color
from cubefield.engine.state import CubeInstance, GridSpec, ViewportState
from cubefield.engine.wave import column_offsets

CUBES_ACROSS = 5.5
HEIGHT_RATIO = 0.5
DEPTH_RATIO = 0.32
# Overscan keeps the visible area covered at full wave displacement and while
# a resize is in flight.
EXTRA_COLUMNS = 3
EXTRA_ROWS = 4
FIRST_COLUMN = -1
FIRST_ROW = -2


def plan(viewport: ViewportState) -> GridSpec:
    cube_width = viewport.logical_width / CUBES_ACROSS
    cube_height = cube_width * HEIGHT_RATIO
    cube_depth = cube_width * DEPTH_RATIO
    spacing_x = cube_width
    spacing_y = cube_height / 2 + cube_depth
    return GridSpec(
        cube_width=cube_width,
        cube_height=cube_height,
        cube_depth=cube_depth,
        spacing_x=spacing_x,
        spacing_y=spacing_y,
        columns=math.ceil(viewport.logical_width / spacing_x) + EXTRA_COLUMNS,
        rows=math.ceil(viewport.logical_height / spacing_y) + EXTRA_ROWS,
    )


def row_range(grid: GridSpec) -> range:
    """Rows in back-to-front draw order."""
    return range(FIRST_ROW, grid.rows)


def column_range(grid: GridSpec) -> range:
    return range(FIRST_COLUMN, grid.columns)


def cell_origin(grid: GridSpec, row: int, column: int) -> tuple[float, float]:
    # Odd rows shift by half a cube for the brick-like isometric packing.
    x_offset = 0.0 if row % 2 == 0 else grid.cube_width / 2
    x = column * grid.spacing_x + x_offset - grid.cube_width / 2
    y = row * grid.spacing_y - grid.cube_height
    return x, y


def iter_cube_instances(grid: GridSpec, phase: float) -> Iterator[CubeInstance]:
    """Yield every cube of the frame in painter's order."""

    columns = column_range(grid)
    offsets = column_offsets(np.arange(columns.start, columns.stop), phase)
    top_colors = [lerp_top_color(float(t)) for t in blend_factors(offsets)]

    for row in row_range(grid):
        for index, column in enumerate(columns):
            x, y = cell_origin(grid, row, column)
            yield CubeInstance(
                row=row,
                column=column,
                origin_x=x,
                origin_y=y + float(offsets[index]),
                top_color=top_colors[index],
            )
