"""Core primitives shared by the TermiCrawler engines."""

from termicrawler.core.battle_state import BattleState, LogEntry, Side
from termicrawler.core.entities import Battler, Position
from termicrawler.core.rng import GameRNG, SineRNG

__all__ = [
    # rng
    "GameRNG",
    "SineRNG",
    # entities
    "Battler",
    "Position",
    # battle_state
    "BattleState",
    "LogEntry",
    "Side",
]
