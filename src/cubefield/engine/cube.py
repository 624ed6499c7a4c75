from __future__ import annotations

import pygame

from cubefield.engine.color import HSLColor

Point = tuple[float, float]
Polygon = list[Point]


def cube_faces(
    origin_x: float,
    origin_y: float,
    width: float,
    height: float,
    depth: float,
    scale: float = 1.0,
) -> tuple[Polygon, Polygon, Polygon]:
    """Return the top, left and right face polygons of one isometric cube.

    ``origin_x`` is the horizontal centre of the cube and ``origin_y`` the top
    vertex of its diamond. Coordinates are logical and multiplied by ``scale``.
    """
    cx, y = origin_x, origin_y
    half_w = width / 2
    half_h = height / 2

    top = [
        (cx, y),
        (cx + half_w, y + half_h),
        (cx, y + height),
        (cx - half_w, y + half_h),
    ]
    left = [
        (cx - half_w, y + half_h),
        (cx, y + height),
        (cx, y + height + depth),
        (cx - half_w, y + half_h + depth),
    ]
    right = [
        (cx + half_w, y + half_h),
        (cx, y + height),
        (cx, y + height + depth),
        (cx + half_w, y + half_h + depth),
    ]
    if scale != 1.0:
        top, left, right = (
            [(px * scale, py * scale) for px, py in face] for face in (top, left, right)
        )
    return top, left, right


def draw_cube(
    surface: pygame.Surface,
    origin_x: float,
    origin_y: float,
    width: float,
    height: float,
    depth: float,
    top_color: HSLColor | pygame.Color,
    left_color: HSLColor | pygame.Color,
    right_color: HSLColor | pygame.Color,
    scale: float = 1.0,
) -> None:
    faces = cube_faces(origin_x, origin_y, width, height, depth, scale)
    # Top, left, right; later faces overlap the shared edges of earlier ones.
    for face, color in zip(faces, (top_color, left_color, right_color)):
        if isinstance(color, HSLColor):
            color = color.to_pygame()
        pygame.draw.polygon(surface, color, face)
