"""Encounter markers -- enemy and shop overlays on plain floor cells.

Markers are placed by the session after generation using its own RNG, and
cleared back to ``floor`` once the encounter or visit is resolved.
"""

from __future__ import annotations

from termicrawler.core.entities import Position
from termicrawler.core.rng import GameRNG
from termicrawler.dungeon.generator import CellType, DungeonMap

MARKER_TYPES = frozenset({CellType.ENEMY, CellType.SHOP})


def place_markers(
    dungeon: DungeonMap,
    rng: GameRNG,
    enemies: int,
    shops: int,
) -> list[Position]:
    """Overlay *enemies* enemy markers and *shops* shop markers on distinct
    plain floor cells.  Start and exit are never used.

    If there are fewer free cells than requested, as many markers as fit are
    placed (enemies first).  Returns the marked positions in placement order.
    """
    if enemies < 0 or shops < 0:
        raise ValueError(f"marker counts must be >= 0, got enemies={enemies}, shops={shops}")

    free = dungeon.cells_of(CellType.FLOOR)
    wanted = [CellType.ENEMY] * enemies + [CellType.SHOP] * shops
    count = min(len(free), len(wanted))
    chosen = rng.random_sample(free, count)

    for pos, marker in zip(chosen, wanted):
        dungeon.grid[pos.y][pos.x] = marker
    return chosen


def clear_marker(dungeon: DungeonMap, pos: Position) -> bool:
    """Revert an enemy/shop marker at *pos* to floor.

    Returns ``False`` (and leaves the grid alone) if the cell holds no
    marker.
    """
    if dungeon.cell_at(pos) not in MARKER_TYPES:
        return False
    dungeon.grid[pos.y][pos.x] = CellType.FLOOR
    return True
