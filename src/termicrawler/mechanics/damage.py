"""Damage calculation for typed-word attacks.

Implements the attack pipeline:
    atk + word-length bonus -> + weak-letter bonus -> x trait multiplier
    -> floor -> optional critical x1.5 (floor)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .trait_effects import TraitBonuses, aggregate_traits

if TYPE_CHECKING:
    from termicrawler.core.entities import Battler

WEAK_LETTER_BONUS = 2
CRITICAL_MULTIPLIER = 1.5
WORD_LENGTH_STEP = 0.1


@dataclass
class AttackResult:
    """Everything an attack does, before it is applied to the battlers."""

    damage: int
    weak_hits: int
    weak_bonus: int
    is_critical: bool
    bonuses: TraitBonuses

    @property
    def heal(self) -> int:
        return math.floor(self.bonuses.heal)

    @property
    def en_restore(self) -> int:
        return math.floor(self.bonuses.en_restore)


def base_damage(atk: int, word: str) -> float:
    """``atk + (1 + 0.1 * len(word))``."""
    return atk + (1 + WORD_LENGTH_STEP * len(word))


def count_weak_hits(word: str, weak_letters: list[str] | None) -> int:
    """Number of letters in *word* that are weak letters, counting repeats."""
    if not weak_letters:
        return 0
    weak = set(weak_letters)
    return sum(1 for letter in word.upper() if letter in weak)


def calculate_attack(
    attacker: Battler,
    defender: Battler,
    word: str,
    crit_roll: float,
) -> AttackResult:
    """Resolve an attack with the given typed *word*.

    *crit_roll* is a uniform draw in ``[0, 1)``; the hit is critical when it
    falls below the aggregated crit rate.
    """
    bonuses = aggregate_traits(word, attacker)
    weak_hits = count_weak_hits(word, defender.weak_letters)
    weak_bonus = WEAK_LETTER_BONUS * weak_hits

    damage = math.floor(
        (base_damage(attacker.atk, word) + weak_bonus) * bonuses.damage_multiplier
    )

    is_critical = crit_roll < bonuses.crit_rate
    if is_critical:
        damage = math.floor(damage * CRITICAL_MULTIPLIER)

    return AttackResult(
        damage=max(0, damage),
        weak_hits=weak_hits,
        weak_bonus=weak_bonus,
        is_critical=is_critical,
        bonuses=bonuses,
    )
