"""Telemetry data models for per-battle and per-run statistics.

These lightweight dataclasses capture what is needed to judge game balance
(how long fights last, how much damage traits and weak letters add) without
storing every battle snapshot:

- **BattleTelemetry**: outcome, damage dealt/taken, words typed, skills used.
- **RunTelemetry**: seed, ordered list of battle results, final outcome.

Both classes are plain ``dataclass`` instances (not Pydantic models) to
keep collection cheap during batch runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class BattleTelemetry:
    """Stats from a single battle.

    Attributes
    ----------
    enemy_name:
        Name of the enemy fought.
    result:
        ``"win"`` if the enemy was defeated, ``"loss"`` if the player fell,
        ``"timeout"`` if the turn cap was hit first.
    turns:
        Number of player attacks made.
    player_hp_start:
        Player HP at the start of the battle.
    player_hp_end:
        Player HP at the end of the battle (0 on loss).
    damage_dealt:
        Total HP removed from the enemy by attacks and skills.
    critical_hits:
        Attacks that rolled a critical.
    weak_hits:
        Weak-letter occurrences across all typed words.
    words_typed:
        The words used for each attack, in order.
    skills_used:
        Breakdown of skills used: ``skill_id -> count``.
    """

    enemy_name: str
    result: str  # "win", "loss" or "timeout"
    turns: int
    player_hp_start: int
    player_hp_end: int
    damage_dealt: int
    critical_hits: int = 0
    weak_hits: int = 0
    words_typed: list[str] = field(default_factory=list)
    skills_used: dict[str, int] = field(default_factory=dict)

    @property
    def hp_lost(self) -> int:
        return self.player_hp_start - self.player_hp_end


@dataclass
class RunTelemetry:
    """Stats from a full simulated run.

    Attributes
    ----------
    seed:
        The session seed used for this run.
    battles:
        Ordered list of battle telemetry, one per encounter.
    final_result:
        ``"loss"`` if the player died, ``"survived"`` if the run ended on
        its floor or step limit.
    floors_reached:
        Deepest floor entered.
    steps:
        Successful moves made in the dungeon.
    purchases:
        Shop item ids bought, in order.
    """

    seed: int
    battles: list[BattleTelemetry] = field(default_factory=list)
    final_result: str = "survived"  # "survived" or "loss"
    floors_reached: int = 0
    steps: int = 0
    purchases: list[str] = field(default_factory=list)
    final_level: int = 1
