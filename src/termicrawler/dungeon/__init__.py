"""Dungeon module -- floor generation and encounter markers."""

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
from termicrawler.dungeon.markers import clear_marker, place_markers

__all__ = [
    "MAX_ROOMS",
    "MIN_ROOM_SIZE",
    "MAX_ROOM_SIZE",
    "CellType",
    "DungeonGenerator",
    "DungeonMap",
    "Room",
    "generate",
    "clear_marker",
    "place_markers",
]
