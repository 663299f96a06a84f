"""Procedural dungeon generator.

Builds one floor as a grid of cells:

- Up to ``MAX_ROOMS`` placement attempts for rectangular rooms
  (``MIN_ROOM_SIZE``..``MAX_ROOM_SIZE`` per side, 1-cell border kept)
- Overlapping candidates are dropped, never retried
- Each accepted room is joined to the previous one by an L-shaped corridor
- First room centre is the start, last room centre is the exit

Every draw comes from one :class:`SineRNG` owned by the ``generate`` call,
so a seed always reproduces the same map.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from termicrawler.core.entities import Position
from termicrawler.core.rng import SineRNG

MAX_ROOMS = 10
MIN_ROOM_SIZE = 3
MAX_ROOM_SIZE = 8


class CellType(str, Enum):
    WALL = "wall"
    FLOOR = "floor"
    START = "start"
    EXIT = "exit"
    SHOP = "shop"
    ENEMY = "enemy"


class Room(BaseModel):
    """Axis-aligned rectangle in grid coordinates."""

    x: int
    y: int
    w: int
    h: int

    @property
    def center(self) -> Position:
        return Position(x=self.x + self.w // 2, y=self.y + self.h // 2)

    def intersects(self, other: Room) -> bool:
        """Inclusive bounding-box test; rooms that merely touch count."""
        return (
            self.x <= other.x + other.w
            and self.x + self.w >= other.x
            and self.y <= other.y + other.h
            and self.y + self.h >= other.y
        )


class DungeonMap(BaseModel):
    """One generated floor."""

    width: int
    height: int
    grid: list[list[CellType]]
    """Indexed ``grid[y][x]``."""

    start_pos: Position
    exit_pos: Position
    rooms: list[Room]

    # -- queries -------------------------------------------------------------

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def cell_at(self, pos: Position) -> CellType:
        return self.grid[pos.y][pos.x]

    def is_walkable(self, pos: Position) -> bool:
        return self.in_bounds(pos) and self.cell_at(pos) != CellType.WALL

    def cells_of(self, cell_type: CellType) -> list[Position]:
        return [
            Position(x=x, y=y)
            for y, row in enumerate(self.grid)
            for x, cell in enumerate(row)
            if cell == cell_type
        ]

    # -- rendering -----------------------------------------------------------

    def to_ascii(self, player_pos: Position | None = None) -> str:
        """Render the floor as minimap text, one line per row."""
        lines: list[str] = []
        for y, row in enumerate(self.grid):
            chars = [_MINIMAP_CHARS[cell] for cell in row]
            if player_pos is not None and player_pos.y == y:
                chars[player_pos.x] = "@"
            lines.append("".join(chars))
        return "\n".join(lines)


_MINIMAP_CHARS: dict[CellType, str] = {
    CellType.WALL: "#",
    CellType.FLOOR: ".",
    CellType.START: "<",
    CellType.EXIT: ">",
    CellType.SHOP: "$",
    CellType.ENEMY: "E",
}


class DungeonGenerator:
    """Generates connected room-and-corridor floors."""

    def __init__(
        self,
        max_rooms: int = MAX_ROOMS,
        min_room_size: int = MIN_ROOM_SIZE,
        max_room_size: int = MAX_ROOM_SIZE,
    ) -> None:
        self.max_rooms = max_rooms
        self.min_room_size = min_room_size
        self.max_room_size = max_room_size

    def generate(self, width: int, height: int, seed: int) -> DungeonMap:
        """Generate a floor of *width* x *height* cells from *seed*.

        Grids smaller than ``2 * max_room_size`` on either side are not
        supported.
        """
        rng = SineRNG(seed)
        grid = [[CellType.WALL] * width for _ in range(height)]
        rooms: list[Room] = []

        for _ in range(self.max_rooms):
            w = rng.random_int(self.min_room_size, self.max_room_size)
            h = rng.random_int(self.min_room_size, self.max_room_size)
            x = rng.random_int(1, width - w - 1)
            y = rng.random_int(1, height - h - 1)
            room = Room(x=x, y=y, w=w, h=h)

            if any(room.intersects(other) for other in rooms):
                continue

            _carve_room(grid, room)
            if rooms:
                horizontal_first = rng.random_int(0, 1) == 0
                _carve_corridor(grid, rooms[-1].center, room.center, horizontal_first)
            rooms.append(room)

        start_pos = rooms[0].center
        exit_pos = rooms[-1].center
        grid[start_pos.y][start_pos.x] = CellType.START
        grid[exit_pos.y][exit_pos.x] = CellType.EXIT

        return DungeonMap(
            width=width,
            height=height,
            grid=grid,
            start_pos=start_pos,
            exit_pos=exit_pos,
            rooms=rooms,
        )


def generate(width: int, height: int, seed: int) -> DungeonMap:
    """Generate a floor with the default room parameters."""
    return DungeonGenerator().generate(width, height, seed)


def _carve_room(grid: list[list[CellType]], room: Room) -> None:
    for ry in range(room.y, room.y + room.h):
        for rx in range(room.x, room.x + room.w):
            grid[ry][rx] = CellType.FLOOR


def _carve_corridor(
    grid: list[list[CellType]],
    a: Position,
    b: Position,
    horizontal_first: bool,
) -> None:
    """Carve an L-shaped corridor from *a* to *b*, endpoints included."""
    if horizontal_first:
        _carve_h(grid, a.x, b.x, a.y)
        _carve_v(grid, a.y, b.y, b.x)
    else:
        _carve_v(grid, a.y, b.y, a.x)
        _carve_h(grid, a.x, b.x, b.y)


def _carve_h(grid: list[list[CellType]], x1: int, x2: int, y: int) -> None:
    for cx in range(min(x1, x2), max(x1, x2) + 1):
        grid[y][cx] = CellType.FLOOR


def _carve_v(grid: list[list[CellType]], y1: int, y2: int, x: int) -> None:
    for cy in range(min(y1, y2), max(y1, y2) + 1):
        grid[cy][x] = CellType.FLOOR
