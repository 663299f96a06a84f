"""Enemy generation for dungeon encounters.

Enemies scale linearly with the floor:
- HP: 20 + 10 per floor
- ATK: 5 + 2 per floor
- Two fresh weak letters per encounter
"""

from __future__ import annotations

import string

from termicrawler.core.entities import Battler
from termicrawler.core.rng import GameRNG

WEAK_LETTER_COUNT = 2


def roll_weak_letters(rng: GameRNG, count: int = WEAK_LETTER_COUNT) -> list[str]:
    """Pick *count* distinct uppercase letters, sorted for display."""
    return sorted(rng.random_sample(string.ascii_uppercase, count))


def build_enemy(floor: int, rng: GameRNG) -> Battler:
    """Build the enemy met on *floor* (1-based)."""
    if floor < 1:
        raise ValueError(f"floor must be >= 1, got {floor}")
    hp = 20 + floor * 10
    return Battler(
        name=f"Bug v{floor}.0",
        is_player=False,
        hp=hp,
        max_hp=hp,
        atk=5 + floor * 2,
        weak_letters=roll_weak_letters(rng),
    )


def build_player_battler(player: Battler) -> Battler:
    """Copy the persistent player into a battle-ready battler.

    Shields never carry over from a previous fight.
    """
    return player.model_copy(update={"shield": 0}, deep=True)
