"""Trait aggregation -- turn a typed word into per-effect bonus totals.

Each letter of the word whose trait the player owns (level > 0) contributes
``base_value + TRAIT_LEVEL_SCALE * level`` to the bucket of its effect type.
Repeated letters contribute once per occurrence.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from termicrawler.content.traits import LETTER_TRAITS, TraitEffectType

if TYPE_CHECKING:
    from termicrawler.core.entities import Battler

TRAIT_LEVEL_SCALE = 0.5
BASE_CRIT_RATE = 0.05
DAMAGE_UP_STEP = 0.1
"""Multiplier added per unit of aggregated ``damage_up`` value."""


@dataclass
class TraitBonuses:
    """Aggregated trait values for one attack."""

    heal: float = 0.0
    en_restore: float = 0.0
    crit_rate_bonus: float = 0.0
    damage_multiplier_bonus: float = 0.0
    defense_up: float = 0.0
    """Aggregated but not applied anywhere yet."""

    @property
    def crit_rate(self) -> float:
        return BASE_CRIT_RATE + self.crit_rate_bonus

    @property
    def damage_multiplier(self) -> float:
        return 1 + DAMAGE_UP_STEP * self.damage_multiplier_bonus


def trait_value(base_value: float, level: int) -> float:
    return base_value + TRAIT_LEVEL_SCALE * level


def aggregate_traits(word: str, player: Battler) -> TraitBonuses:
    """Sum the trait contributions of every letter in *word*."""
    bonuses = TraitBonuses()

    for letter in word.upper():
        trait = LETTER_TRAITS.get(letter)
        if trait is None:
            continue
        level = player.trait_level(letter)
        if level <= 0:
            continue

        value = trait_value(trait.base_value, level)
        if trait.effect_type == TraitEffectType.HEAL:
            bonuses.heal += value
        elif trait.effect_type == TraitEffectType.EN_RESTORE:
            bonuses.en_restore += value
        elif trait.effect_type == TraitEffectType.CRIT_RATE:
            bonuses.crit_rate_bonus += value
        elif trait.effect_type == TraitEffectType.DAMAGE_UP:
            bonuses.damage_multiplier_bonus += value
        elif trait.effect_type == TraitEffectType.DEFENSE_UP:
            bonuses.defense_up += value

    return bonuses
