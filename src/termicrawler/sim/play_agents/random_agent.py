"""Random typist -- types random words and uses skills by simple rules.

The ``RandomTypist`` is the baseline agent for batch simulation runs.

Behaviour:
    - Steps in a uniformly random cardinal direction.
    - Uses REPAIR when HP is below ``heal_threshold`` of max and it can pay.
    - Raises SHIELD when it can pay and no shield is up, with probability
      ``shield_chance``.
    - Types a uniformly random word from the available list.
    - At a shop, buys the cheapest item it can afford (never the same
      consumable twice in a row), otherwise leaves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from termicrawler.content.shop import ShopItemType
from termicrawler.content.skills import get_skill
from termicrawler.core.rng import GameRNG
from termicrawler.mechanics.energy import can_afford
from termicrawler.sim.play_agents.base import PlayAgent

if TYPE_CHECKING:
    from termicrawler.content.shop import ShopItem
    from termicrawler.core.battle_state import BattleState
    from termicrawler.core.entities import Battler
    from termicrawler.game.session import GameSession

_DIRECTIONS: list[tuple[int, int]] = [(0, -1), (0, 1), (-1, 0), (1, 0)]


class RandomTypist(PlayAgent):
    """Agent that types random words and uses skills by simple thresholds.

    Parameters
    ----------
    rng:
        Seeded RNG for deterministic choices.  If ``None``, a default
        ``GameRNG(seed=0)`` is created.
    heal_threshold:
        Fraction of max HP below which REPAIR is used.
    shield_chance:
        Probability of raising a shield when one is affordable.
    """

    def __init__(
        self,
        rng: GameRNG | None = None,
        heal_threshold: float = 0.4,
        shield_chance: float = 0.25,
    ) -> None:
        self._rng = rng or GameRNG(seed=0)
        self._heal_threshold = heal_threshold
        self._shield_chance = shield_chance
        self._last_purchase: str | None = None

    def choose_move(self, session: GameSession) -> tuple[int, int]:
        return self._rng.random_choice(_DIRECTIONS)

    def choose_skill(self, battle: BattleState) -> str | None:
        player = battle.player
        repair = get_skill("heal")
        if (
            player.hp < player.max_hp * self._heal_threshold
            and can_afford(player, repair.cost)
        ):
            return repair.id

        shield = get_skill("shield")
        if (
            player.shield == 0
            and can_afford(player, shield.cost)
            and self._rng.random_float() < self._shield_chance
        ):
            return shield.id
        return None

    def choose_word(self, battle: BattleState, words: list[str]) -> str:
        return self._rng.random_choice(words)

    def choose_purchase(self, player: Battler, items: list[ShopItem]) -> str | None:
        credits = player.credits or 0
        affordable = [
            item for item in items
            if item.cost <= credits
            and not (item.item_type == ShopItemType.ITEM and item.id == self._last_purchase)
        ]
        if not affordable:
            self._last_purchase = None
            return None
        choice = min(affordable, key=lambda item: item.cost)
        self._last_purchase = choice.id
        return choice.id
