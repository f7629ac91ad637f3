"""Static scene geometry: the floor tiles, the outer wall and its top caps."""

from __future__ import annotations

from typing import Callable

from .config import LENGTH_OF_TILE, NUM_OF_COLUMN, NUM_OF_ROW, CustomVertex, Vector3

WALL_HEIGHT = 10.0

_TEXTURE_CORNERS = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))
_UP_NORMAL: Vector3 = (0.0, 1.0, 0.0)

Quad = tuple[CustomVertex, CustomVertex, CustomVertex, CustomVertex]


def _quad(corners: tuple[Vector3, Vector3, Vector3, Vector3], normal: Vector3) -> Quad:
    return tuple(  # type: ignore[return-value]
        CustomVertex(corner, normal, uv) for corner, uv in zip(corners, _TEXTURE_CORNERS)
    )


def _side(corners_of: Callable[[int], tuple[Vector3, Vector3, Vector3, Vector3]],
          normal: Vector3) -> tuple[CustomVertex, ...]:
    return tuple(
        vertex for i in range(NUM_OF_ROW) for vertex in _quad(corners_of(i), normal)
    )


def build_tile_vertices() -> tuple[CustomVertex, ...]:
    """Four vertices for every floor tile, row by row from the far-left corner."""
    tile = LENGTH_OF_TILE
    vertices: list[CustomVertex] = []
    for index in range(NUM_OF_ROW * NUM_OF_COLUMN):
        row, column = divmod(index, NUM_OF_COLUMN)
        x = (column - NUM_OF_COLUMN / 2.0) * tile
        z = (NUM_OF_ROW / 2.0 - row) * tile
        corners = (
            (x, 0.0, z),
            (x + tile, 0.0, z),
            (x + tile, 0.0, z - tile),
            (x, 0.0, z - tile),
        )
        vertices.extend(_quad(corners, _UP_NORMAL))
    return tuple(vertices)


def build_tile_indices() -> tuple[tuple[int, int, int], ...]:
    """Two triangles for every floor tile, indexing into the tile vertices."""
    triangles: list[tuple[int, int, int]] = []
    for tile in range(NUM_OF_ROW * NUM_OF_COLUMN):
        base = tile * 4
        triangles.append((base, base + 1, base + 2))
        triangles.append((base, base + 2, base + 3))
    return tuple(triangles)


def build_outer_walls() -> tuple[tuple[CustomVertex, ...], ...]:
    """The inward-facing outer wall: far, near, left and right sides in that order."""
    tile = LENGTH_OF_TILE
    half = NUM_OF_ROW / 2.0
    h = WALL_HEIGHT

    def far(i: int):
        z = half * tile
        return (((i - half) * tile, h, z), ((i + 1 - half) * tile, h, z),
                ((i + 1 - half) * tile, 0.0, z), ((i - half) * tile, 0.0, z))

    def near(i: int):
        z = -half * tile
        return (((half - i) * tile, h, z), ((half - i - 1) * tile, h, z),
                ((half - i - 1) * tile, 0.0, z), ((half - i) * tile, 0.0, z))

    def left(i: int):
        x = (-half + 1) * tile
        return ((x, h, (i - half) * tile), (x, h, (i + 1 - half) * tile),
                (x, 0.0, (i + 1 - half) * tile), (x, 0.0, (i - half) * tile))

    def right(i: int):
        x = (half - 1) * tile
        return ((x, h, (half - i) * tile), (x, h, (half - i - 1) * tile),
                (x, 0.0, (half - i - 1) * tile), (x, 0.0, (half - i) * tile))

    return (
        _side(far, (0.0, 0.0, -1.0)),
        _side(near, (0.0, 0.0, 1.0)),
        _side(left, (1.0, 0.0, 0.0)),
        _side(right, (-1.0, 0.0, 0.0)),
    )


def build_wall_caps() -> tuple[tuple[CustomVertex, ...], ...]:
    """Horizontal lids on top of the outer wall, side by side as in the wall."""
    tile = LENGTH_OF_TILE
    half = NUM_OF_ROW / 2.0
    h = WALL_HEIGHT

    def far(i: int):
        outer, inner = (half + 1) * tile, half * tile
        return (((i - half) * tile, h, outer), ((i + 1 - half) * tile, h, outer),
                ((i + 1 - half) * tile, h, inner), ((i - half) * tile, h, inner))

    def near(i: int):
        outer, inner = (-half - 1) * tile, -half * tile
        return (((half - i) * tile, h, outer), ((half - i - 1) * tile, h, outer),
                ((half - i - 1) * tile, h, inner), ((half - i) * tile, h, inner))

    def left(i: int):
        outer, inner = -half * tile, (-half + 1) * tile
        return ((outer, h, (i - half) * tile), (outer, h, (i + 1 - half) * tile),
                (inner, h, (i + 1 - half) * tile), (inner, h, (i - half) * tile))

    def right(i: int):
        outer, inner = half * tile, (half - 1) * tile
        return ((outer, h, (half - i) * tile), (outer, h, (half - i - 1) * tile),
                (inner, h, (half - i - 1) * tile), (inner, h, (half - i) * tile))

    return tuple(_side(corners, _UP_NORMAL) for corners in (far, near, left, right))