"""Headless simulation -- play battles and whole runs with a play agent.

Provides two classes:

- **BattleRunner**: plays one battle to completion and records telemetry.
- **RunSimulator**: walks a :class:`GameSession` through the dungeon,
  fighting, shopping and descending until the player dies or a limit is hit.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from termicrawler import battle as battle_system
from termicrawler.content.shop import SHOP_ITEMS
from termicrawler.content.words import word_targets
from termicrawler.game.config import GameConfig
from termicrawler.game.session import GameSession, MoveOutcome
from termicrawler.sim.telemetry import BattleTelemetry, RunTelemetry

if TYPE_CHECKING:
    from termicrawler.core.battle_state import BattleState
    from termicrawler.sim.play_agents.base import PlayAgent

logger = logging.getLogger(__name__)

_MAX_TURNS = 200
_MAX_SKILLS_PER_TURN = 5
_MAX_PURCHASES_PER_VISIT = 10


class BattleRunner:
    """Plays a single battle to completion."""

    def __init__(
        self,
        agent: PlayAgent,
        words: list[str] | None = None,
        max_turns: int = _MAX_TURNS,
    ) -> None:
        self.agent = agent
        self.words = words or word_targets()
        self.max_turns = max_turns

    def run_battle(
        self, state: BattleState, words: list[str] | None = None,
    ) -> tuple[BattleState, BattleTelemetry]:
        """Run *state* until it finishes or the turn cap is reached.

        *words* overrides the runner's word list for this battle.  Returns
        the final state and the telemetry for the fight.
        """
        words = words or self.words
        telemetry = BattleTelemetry(
            enemy_name=state.enemy.name,
            result="timeout",
            turns=0,
            player_hp_start=state.player.hp,
            player_hp_end=state.player.hp,
            damage_dealt=0,
        )

        while not state.is_finished and telemetry.turns < self.max_turns:
            if state.turn == "enemy":
                state = battle_system.execute_enemy_turn(state)
                continue

            state = self._use_skills(state, telemetry)
            if state.is_finished:
                break

            word = self.agent.choose_word(state, words)
            new = battle_system.execute_player_attack(state, word)
            telemetry.turns += 1
            telemetry.words_typed.append(word)
            telemetry.damage_dealt += state.enemy.hp - new.enemy.hp
            for entry in new.log[len(state.log):]:
                if entry.key == "battle.critical":
                    telemetry.critical_hits += 1
                elif entry.key == "battle.weak_hit":
                    telemetry.weak_hits += entry.params["hits"]
            state = new

        if state.is_finished:
            telemetry.result = "win" if state.winner == "player" else "loss"
        else:
            logger.warning(
                "Battle against %s hit the %d turn cap", state.enemy.name, self.max_turns,
            )
        telemetry.player_hp_end = state.player.hp
        return state, telemetry

    def _use_skills(self, state: BattleState, telemetry: BattleTelemetry) -> BattleState:
        for _ in range(_MAX_SKILLS_PER_TURN):
            skill_id = self.agent.choose_skill(state)
            if skill_id is None:
                break
            new = battle_system.execute_skill(state, skill_id)
            if new is state:
                break
            telemetry.skills_used[skill_id] = telemetry.skills_used.get(skill_id, 0) + 1
            telemetry.damage_dealt += state.enemy.hp - new.enemy.hp
            state = new
            if state.is_finished:
                break
        return state


class RunSimulator:
    """Plays a whole session with one agent."""

    def __init__(
        self,
        agent: PlayAgent,
        config: GameConfig | None = None,
        battle_runner: BattleRunner | None = None,
    ) -> None:
        self.agent = agent
        self.config = config or GameConfig()
        self.battle_runner = battle_runner or BattleRunner(agent)

    def run(
        self,
        seed: int,
        max_floors: int = 5,
        max_moves: int = 2000,
        excluded_words: list[str] | None = None,
    ) -> RunTelemetry:
        """Play from floor 1 until death, *max_floors* cleared, or
        *max_moves* move attempts.

        *excluded_words* are struck from the word list before the first
        battle, as if the player had excluded them.
        """
        session = GameSession(config=self.config, seed=seed)
        session.new_game()
        for word in excluded_words or []:
            session.exclude_word(word)
        telemetry = RunTelemetry(seed=seed)

        for _ in range(max_moves):
            dx, dy = self.agent.choose_move(session)
            outcome = session.move(dx, dy)
            if outcome == MoveOutcome.BLOCKED:
                continue
            telemetry.steps += 1

            if outcome == MoveOutcome.ENCOUNTER:
                final, battle_telemetry = self.battle_runner.run_battle(
                    session.battle, session.battle_words(),
                )
                telemetry.battles.append(battle_telemetry)
                if not final.is_finished:
                    telemetry.final_result = "timeout"
                    break
                session.resolve_battle(final)
                if session.game_over:
                    telemetry.final_result = "loss"
                    break

            elif outcome == MoveOutcome.SHOP:
                self._shop(session, telemetry)

            elif outcome == MoveOutcome.EXIT and session.floor > max_floors:
                break

        telemetry.floors_reached = session.floor
        telemetry.final_level = session.player.level or 1
        return telemetry

    def _shop(self, session: GameSession, telemetry: RunTelemetry) -> None:
        for _ in range(_MAX_PURCHASES_PER_VISIT):
            item_id = self.agent.choose_purchase(session.player, SHOP_ITEMS)
            if item_id is None or not session.purchase(item_id):
                break
            telemetry.purchases.append(item_id)
