"""Combat mechanics for the battle system.

Re-exports the primary functions from each mechanics module for convenience.

Usage::

    from termicrawler.mechanics import (
        aggregate_traits, calculate_attack, count_weak_hits,
        can_afford, spend_energy, restore_energy,
    )
"""

# -- traits ------------------------------------------------------------------
from .trait_effects import BASE_CRIT_RATE, TraitBonuses, aggregate_traits, trait_value

# -- damage ------------------------------------------------------------------
from .damage import AttackResult, base_damage, calculate_attack, count_weak_hits

# -- energy ------------------------------------------------------------------
from .energy import can_afford, restore_energy, spend_energy

__all__ = [
    # traits
    "BASE_CRIT_RATE",
    "TraitBonuses",
    "aggregate_traits",
    "trait_value",
    # damage
    "AttackResult",
    "base_damage",
    "calculate_attack",
    "count_weak_hits",
    # energy
    "can_afford",
    "spend_energy",
    "restore_energy",
]
