"""Tile map parsing and the reverse breadth-first distance field used for pathing."""

from __future__ import annotations

from collections import deque
from enum import Enum
from pathlib import Path

MAP_WIDTH = 20
MAP_HEIGHT = 13
BLOCK_SIZE = 64

SPAWN_GRID_POINT = (-1, 0)
END_GRID_POINT = (MAP_WIDTH, MAP_HEIGHT - 1)

# Neighbour order used when expanding the search: right, up, left, down.
_STEPS = ((1, 0), (0, -1), (-1, 0), (0, 1))

_CORRUPTED = "Map data is corrupted."


class MapError(ValueError):
    """Raised when map data cannot be turned into a valid grid."""


class TileType(Enum):
    """Kind of a single map cell."""

    DIRT = 0
    FLOOR = 1
    OCCUPIED = 2


def parse_map(text: str) -> list[list[TileType]]:
    """Parse map text of '0' (dirt) and '1' (floor) cells into rows of tiles.

    Whitespace is ignored; any other character, or a cell count other than
    MAP_WIDTH * MAP_HEIGHT, raises MapError.
    """
    cells: list[TileType] = []
    for char in text:
        if char.isspace():
            continue
        if char == "0":
            cells.append(TileType.DIRT)
        elif char == "1":
            cells.append(TileType.FLOOR)
        else:
            raise MapError(_CORRUPTED)
    if len(cells) != MAP_WIDTH * MAP_HEIGHT:
        raise MapError(_CORRUPTED)
    return [cells[start:start + MAP_WIDTH] for start in range(0, len(cells), MAP_WIDTH)]


def read_map(path: str | Path) -> list[list[TileType]]:
    """Read and parse a map file; an unreadable file is reported as corrupted."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise MapError(_CORRUPTED) from exc
    return parse_map(text)


def bfs_distance(tiles: list[list[TileType]]) -> list[list[int]]:
    """Return the step distance of every dirt cell to the bottom-right cell.

    Cells that cannot reach it hold -1. If the bottom-right cell is not dirt,
    every cell holds -1.
    """
    height = len(tiles)
    width = len(tiles[0]) if tiles else 0
    distance = [[-1] * width for _ in range(height)]
    if not width or tiles[-1][-1] is not TileType.DIRT:
        return distance

    distance[-1][-1] = 0
    queue = deque([(width - 1, height - 1)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            if tiles[ny][nx] is TileType.DIRT and distance[ny][nx] == -1:
                distance[ny][nx] = distance[y][x] + 1
                queue.append((nx, ny))
    return distance