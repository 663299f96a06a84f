"""Tests for procedural dungeon generation."""

from collections import deque

import pytest

from termicrawler.core.entities import Position
from termicrawler.dungeon.generator import (
    MAX_ROOM_SIZE,
    MAX_ROOMS,
    MIN_ROOM_SIZE,
    CellType,
    DungeonGenerator,
    DungeonMap,
    Room,
    generate,
)

SEEDS = list(range(60)) + [1_700_000_000_000, 1_700_000_000_001, 987_654_321]


def _flood_fill(dungeon: DungeonMap) -> set[tuple[int, int]]:
    start = (dungeon.start_pos.x, dungeon.start_pos.y)
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nxt = (x + dx, y + dy)
            if nxt in seen:
                continue
            if dungeon.is_walkable(Position(x=nxt[0], y=nxt[1])):
                seen.add(nxt)
                queue.append(nxt)
    return seen


def _non_wall_cells(dungeon: DungeonMap) -> set[tuple[int, int]]:
    return {
        (x, y)
        for y, row in enumerate(dungeon.grid)
        for x, cell in enumerate(row)
        if cell != CellType.WALL
    }


# ---------------------------------------------------------------------------
# Room
# ---------------------------------------------------------------------------

class TestRoom:
    def test_center_rounds_down(self):
        assert Room(x=2, y=3, w=5, h=4).center == Position(x=4, y=5)

    def test_touching_rooms_intersect(self):
        assert Room(x=1, y=1, w=3, h=3).intersects(Room(x=4, y=1, w=3, h=3))

    def test_separated_rooms_do_not_intersect(self):
        assert not Room(x=1, y=1, w=3, h=3).intersects(Room(x=5, y=1, w=3, h=3))


# ---------------------------------------------------------------------------
# DungeonGenerator
# ---------------------------------------------------------------------------

class TestDungeonGenerator:
    def test_dimensions(self):
        dungeon = generate(30, 20, 42)
        assert dungeon.width == 30
        assert dungeon.height == 20
        assert len(dungeon.grid) == 20
        assert all(len(row) == 30 for row in dungeon.grid)

    def test_deterministic_with_same_seed(self):
        for seed in SEEDS[:10]:
            a = generate(30, 20, seed)
            b = generate(30, 20, seed)
            assert a.model_dump() == b.model_dump(), f"seed={seed}"

    def test_different_seeds_produce_different_maps(self):
        grids = {
            tuple(tuple(row) for row in generate(30, 20, seed).grid)
            for seed in range(30)
        }
        assert len(grids) > 5

    def test_room_count_bounded(self):
        for seed in SEEDS:
            dungeon = generate(30, 20, seed)
            assert 1 <= len(dungeon.rooms) <= MAX_ROOMS, f"seed={seed}"

    def test_room_sizes_in_range(self):
        for seed in SEEDS:
            for room in generate(30, 20, seed).rooms:
                assert MIN_ROOM_SIZE <= room.w <= MAX_ROOM_SIZE
                assert MIN_ROOM_SIZE <= room.h <= MAX_ROOM_SIZE

    def test_rooms_keep_border(self):
        for seed in SEEDS:
            dungeon = generate(30, 20, seed)
            for room in dungeon.rooms:
                assert room.x >= 1 and room.y >= 1
                assert room.x + room.w <= dungeon.width - 1
                assert room.y + room.h <= dungeon.height - 1

    def test_rooms_do_not_overlap(self):
        for seed in SEEDS:
            rooms = generate(30, 20, seed).rooms
            for i, a in enumerate(rooms):
                for b in rooms[i + 1:]:
                    assert not a.intersects(b), f"seed={seed}: {a} overlaps {b}"

    def test_outer_border_is_wall(self):
        for seed in SEEDS:
            dungeon = generate(30, 20, seed)
            assert all(c == CellType.WALL for c in dungeon.grid[0])
            assert all(c == CellType.WALL for c in dungeon.grid[-1])
            assert all(row[0] == CellType.WALL and row[-1] == CellType.WALL for row in dungeon.grid)

    def test_room_interiors_carved(self):
        dungeon = generate(30, 20, 42)
        for room in dungeon.rooms:
            for y in range(room.y, room.y + room.h):
                for x in range(room.x, room.x + room.w):
                    assert dungeon.grid[y][x] != CellType.WALL

    def test_start_and_exit_at_room_centers(self):
        for seed in SEEDS:
            dungeon = generate(30, 20, seed)
            assert dungeon.start_pos == dungeon.rooms[0].center
            assert dungeon.exit_pos == dungeon.rooms[-1].center
            assert dungeon.cell_at(dungeon.exit_pos) == CellType.EXIT

    def test_single_start_and_exit(self):
        for seed in SEEDS:
            dungeon = generate(30, 20, seed)
            starts = dungeon.cells_of(CellType.START)
            exits = dungeon.cells_of(CellType.EXIT)
            assert exits == [dungeon.exit_pos], f"seed={seed}"
            if dungeon.start_pos == dungeon.exit_pos:
                assert starts == []
            else:
                assert starts == [dungeon.start_pos], f"seed={seed}"

    def test_every_open_cell_reachable_from_start(self):
        for seed in SEEDS:
            dungeon = generate(30, 20, seed)
            reached = _flood_fill(dungeon)
            assert reached == _non_wall_cells(dungeon), f"seed={seed}"
            assert (dungeon.exit_pos.x, dungeon.exit_pos.y) in reached

    def test_no_markers_generated(self):
        for seed in SEEDS:
            dungeon = generate(30, 20, seed)
            assert dungeon.cells_of(CellType.ENEMY) == []
            assert dungeon.cells_of(CellType.SHOP) == []

    def test_larger_map(self):
        dungeon = generate(80, 50, 3)
        assert _flood_fill(dungeon) == _non_wall_cells(dungeon)

    def test_single_room_start_equals_exit(self):
        dungeon = DungeonGenerator(max_rooms=1).generate(30, 20, 7)
        assert len(dungeon.rooms) == 1
        assert dungeon.start_pos == dungeon.exit_pos
        assert dungeon.cell_at(dungeon.exit_pos) == CellType.EXIT

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_ascii_rendering(self, seed):
        dungeon = generate(30, 20, seed)
        lines = dungeon.to_ascii(player_pos=dungeon.start_pos).splitlines()
        assert len(lines) == 20
        assert all(len(line) == 30 for line in lines)
        assert lines[dungeon.start_pos.y][dungeon.start_pos.x] == "@"


class TestDungeonMapQueries:
    def test_out_of_bounds_not_walkable(self):
        dungeon = generate(30, 20, 1)
        assert not dungeon.is_walkable(Position(x=-1, y=0))
        assert not dungeon.is_walkable(Position(x=30, y=5))

    def test_start_walkable(self):
        dungeon = generate(30, 20, 1)
        assert dungeon.is_walkable(dungeon.start_pos)
