"""Battle system -- turn resolution for one player-versus-enemy fight.

The battle is a two-phase state machine::

    player turn --attack--> enemy turn --enemy attack--> player turn ...
         |  ^
         +--+ skill (does not end the turn)

Every transition takes a :class:`BattleState` and returns a new one; the
input snapshot is never modified.  Calling a transition out of turn or on a
finished battle is a caller error: it is logged and the input state is
returned unchanged.

The only randomness is the critical-hit roll, drawn from ``state.rng``.
"""

from __future__ import annotations

import logging
import random

from termicrawler.content.skills import SkillEffectType, get_skill
from termicrawler.core.battle_state import BattleState, Side
from termicrawler.core.entities import Battler
from termicrawler.core.rng import GameRNG
from termicrawler.mechanics.damage import calculate_attack
from termicrawler.mechanics.energy import can_afford, restore_energy, spend_energy

logger = logging.getLogger(__name__)


def init(player: Battler, enemy: Battler, rng: GameRNG | None = None) -> BattleState:
    """Start a battle.  The player moves first."""
    if rng is None:
        rng = GameRNG(random.randrange(2**32))
    state = BattleState(
        player=player.model_copy(deep=True),
        enemy=enemy.model_copy(deep=True),
        turn="player",
        rng=rng,
    )
    state.add_log("battle.encounter", enemy=enemy.name)
    logger.debug("Battle started: %s vs %s (%r)", player.name, enemy.name, rng)
    return state


def execute_player_attack(state: BattleState, typed_word: str) -> BattleState:
    """Resolve an attack with the word the player just finished typing."""
    if not _check_turn(state, "player", "execute_player_attack"):
        return state

    new = state.next()
    result = calculate_attack(new.player, new.enemy, typed_word, _rng(new).random_float())

    new.enemy.take_damage(result.damage)
    new.player.heal(result.heal)
    restore_energy(new.player, result.en_restore)

    if result.is_critical:
        new.add_log("battle.critical")
    new.add_log("battle.player_attack", damage=result.damage, word=typed_word)
    if result.weak_hits:
        new.add_log("battle.weak_hit", hits=result.weak_hits, bonus=result.weak_bonus)
    if result.heal:
        new.add_log("battle.trait_heal", amount=result.heal)
    if result.en_restore:
        new.add_log("battle.trait_en", amount=result.en_restore)

    logger.debug(
        "Player typed %r: %d damage (crit=%s, weak=%d)",
        typed_word, result.damage, result.is_critical, result.weak_hits,
    )

    new.turn = "enemy"
    if new.enemy.is_dead:
        _finish(new, "player")
    return new


def execute_skill(state: BattleState, skill_id: str) -> BattleState:
    """Use a skill.  Unknown or unaffordable skills leave the state as-is.

    Skills are free actions: the player keeps the turn.
    """
    if not _check_turn(state, "player", "execute_skill"):
        return state

    skill = get_skill(skill_id)
    if skill is None:
        logger.warning("Unknown skill %r, ignoring", skill_id)
        return state
    if not can_afford(state.player, skill.cost):
        logger.debug("Cannot afford %s (cost %d, en %s)", skill.id, skill.cost, state.player.en)
        return state

    new = state.next()
    spend_energy(new.player, skill.cost)

    if skill.effect_type == SkillEffectType.HEAL:
        amount = new.player.heal(skill.value or 0)
        new.add_log("battle.skill_heal", skill=skill.name, amount=amount)

    elif skill.effect_type == SkillEffectType.SHIELD:
        new.player.shield = 1
        new.add_log("battle.skill_shield", skill=skill.name)

    elif skill.effect_type == SkillEffectType.SCAN:
        letters = new.enemy.weak_letters or []
        new.add_log("battle.skill_scan", skill=skill.name, letters=", ".join(letters))

    elif skill.effect_type == SkillEffectType.DAMAGE:
        damage = new.enemy.take_damage(skill.value or 0)
        new.add_log("battle.skill_damage", skill=skill.name, damage=damage)
        if new.enemy.is_dead:
            _finish(new, "player")

    logger.debug("Player used %s (en now %s)", skill.id, new.player.en)
    return new


def execute_enemy_turn(state: BattleState) -> BattleState:
    """The enemy attacks for its flat ``atk`` unless the player is shielded."""
    if not _check_turn(state, "enemy", "execute_enemy_turn"):
        return state

    new = state.next()
    if new.player.shield > 0:
        new.add_log("battle.shield_block", enemy=new.enemy.name)
    else:
        damage = new.player.take_damage(new.enemy.atk)
        new.add_log("battle.enemy_attack", enemy=new.enemy.name, damage=damage)
    new.player.shield = 0

    new.turn = "player"
    if new.player.is_dead:
        _finish(new, "enemy")
    return new


# ---------------------------------------------------------------------------
# internal helpers
# ---------------------------------------------------------------------------

def _check_turn(state: BattleState, expected: Side, operation: str) -> bool:
    if state.is_finished:
        logger.warning("%s called on a finished battle, ignoring", operation)
        return False
    if state.turn != expected:
        logger.warning(
            "%s called during the %s turn, ignoring", operation, state.turn,
        )
        return False
    return True


def _finish(state: BattleState, winner: Side) -> None:
    state.is_finished = True
    state.winner = winner
    if winner == "player":
        state.add_log("battle.enemy_defeated", enemy=state.enemy.name)
    else:
        state.add_log("battle.player_defeated")
    logger.debug("Battle over, winner: %s", winner)


def _rng(state: BattleState) -> GameRNG:
    if state.rng is None:
        state.rng = GameRNG(random.randrange(2**32))
    return state.rng
