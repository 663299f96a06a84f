"""Player progression -- experience, levels and battle rewards."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from termicrawler.core.entities import Battler

VICTORY_EXP = 10
VICTORY_HEAL = 10
LEVEL_UP_MAX_HP = 10
LEVEL_UP_ATK = 2


@dataclass
class VictoryReward:
    exp: int
    credits: int
    healed: int
    levels_gained: int


def exp_to_next_level(level: int) -> int:
    """Experience needed to go from *level* to *level + 1*."""
    return math.floor(50 * math.pow(1.2, level - 1))


def credits_for_floor(floor: int) -> int:
    return 10 + 5 * floor


def level_up(player: Battler) -> int:
    """Spend banked experience on as many level-ups as it covers.

    Each level raises ``max_hp`` (healing by the same amount) and ``atk``.
    Returns the number of levels gained.
    """
    gained = 0
    while player.exp >= exp_to_next_level(player.level):
        player.exp -= exp_to_next_level(player.level)
        player.level += 1
        player.max_hp += LEVEL_UP_MAX_HP
        player.hp += LEVEL_UP_MAX_HP
        player.atk += LEVEL_UP_ATK
        gained += 1
    return gained


def apply_victory(player: Battler, floor: int) -> VictoryReward:
    """Grant the rewards for winning a battle on *floor*."""
    credits = credits_for_floor(floor)
    player.exp = (player.exp or 0) + VICTORY_EXP
    player.credits = (player.credits or 0) + credits
    player.level = player.level or 1
    healed = player.heal(VICTORY_HEAL)
    levels = level_up(player)
    return VictoryReward(exp=VICTORY_EXP, credits=credits, healed=healed, levels_gained=levels)
