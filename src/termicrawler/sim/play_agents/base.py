"""Base class for agents that play TermiCrawler headlessly.

The simulators call these methods at each decision point: which way to
step in the dungeon, which skill (if any) to use, which word to type, and
what to buy at a shop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from termicrawler.content.shop import ShopItem
    from termicrawler.core.battle_state import BattleState
    from termicrawler.core.entities import Battler
    from termicrawler.game.session import GameSession


class PlayAgent(ABC):
    """Base class for agents that play the game."""

    @abstractmethod
    def choose_move(self, session: GameSession) -> tuple[int, int]:
        """Return the ``(dx, dy)`` step to attempt next."""

    @abstractmethod
    def choose_skill(self, battle: BattleState) -> str | None:
        """Return a skill id to use before attacking, or ``None`` to attack.

        Called repeatedly during the player's turn until it returns
        ``None`` or the skill has no effect on the state.
        """

    @abstractmethod
    def choose_word(self, battle: BattleState, words: list[str]) -> str:
        """Return the word to type for this attack.

        Parameters
        ----------
        battle:
            The current battle state.
        words:
            The words currently available to type.
        """

    @abstractmethod
    def choose_purchase(self, player: Battler, items: list[ShopItem]) -> str | None:
        """Return the id of a shop item to buy, or ``None`` to leave."""
