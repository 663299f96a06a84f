"""Energy system -- spend and restore.

Only the player carries an energy pool.  Battlers whose ``en`` is ``None``
can never afford anything and ignore restores.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from termicrawler.core.entities import Battler


def can_afford(battler: Battler, cost: int) -> bool:
    return battler.en is not None and battler.en >= cost


def spend_energy(battler: Battler, amount: int) -> bool:
    """Attempt to spend energy.  Returns False if insufficient."""
    if not can_afford(battler, amount):
        return False
    battler.en -= amount
    return True


def restore_energy(battler: Battler, amount: int) -> int:
    """Add energy, capped at ``max_en``.  Returns the energy actually gained."""
    if amount <= 0 or not battler.has_energy_pool:
        return 0
    gained = min(battler.max_en - battler.en, amount)
    battler.en += gained
    return gained
