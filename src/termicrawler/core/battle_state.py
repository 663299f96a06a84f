"""Battle state for a single TermiCrawler encounter.

A :class:`BattleState` is a snapshot.  The battle system never mutates the
snapshot it is given; each transition works on :meth:`BattleState.next`
and returns that copy.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from termicrawler.core.entities import Battler

Side = Literal["player", "enemy"]


# ---------------------------------------------------------------------------
# LogEntry
# ---------------------------------------------------------------------------

class LogEntry(BaseModel):
    """A localisable battle message: a catalogue key plus its parameters."""

    key: str
    params: dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# BattleState
# ---------------------------------------------------------------------------

class BattleState(BaseModel):
    """Full state of one player-versus-enemy battle."""

    model_config = {"arbitrary_types_allowed": True}

    player: Battler
    enemy: Battler
    turn: Side = "player"
    log: list[LogEntry] = Field(default_factory=list)
    is_finished: bool = False
    winner: Side | None = None

    rng: Any = Field(default=None, exclude=True)
    """Battle RNG used for critical-hit rolls.  Excluded from serialization
    and shared between successive snapshots of the same battle."""

    def next(self) -> BattleState:
        """Return a copy that a transition may modify freely.

        Battlers and the log are copied; the RNG is shared so that the
        random stream keeps advancing across snapshots.
        """
        return self.model_copy(
            update={
                "player": self.player.model_copy(deep=True),
                "enemy": self.enemy.model_copy(deep=True),
                "log": list(self.log),
            }
        )

    def add_log(self, key: str, **params: Any) -> None:
        self.log.append(LogEntry(key=key, params=params))

    @property
    def log_keys(self) -> list[str]:
        return [entry.key for entry in self.log]
