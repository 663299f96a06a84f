"""Tests for the battle state machine."""

import pytest

from termicrawler import battle
from termicrawler.content.words import word_targets
from termicrawler.core.battle_state import BattleState
from termicrawler.core.entities import Battler
from termicrawler.core.rng import GameRNG


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_player(**kwargs) -> Battler:
    defaults = dict(
        name="Player", is_player=True, hp=100, max_hp=100, en=50, max_en=50, atk=10,
        level=1, exp=0, credits=0,
    )
    defaults.update(kwargs)
    return Battler(**defaults)


def _make_enemy(**kwargs) -> Battler:
    defaults = dict(name="Bug v1.0", hp=30, max_hp=30, atk=8, weak_letters=["A", "K"])
    defaults.update(kwargs)
    return Battler(**defaults)


def _enemy_turn_state(player=None, enemy=None) -> BattleState:
    return BattleState(
        player=player or _make_player(),
        enemy=enemy or _make_enemy(),
        turn="enemy",
    )


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------

class TestInit:
    def test_player_moves_first(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(), rng=no_crit_rng)
        assert state.turn == "player"
        assert not state.is_finished
        assert state.winner is None

    def test_encounter_logged(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(), rng=no_crit_rng)
        assert state.log_keys == ["battle.encounter"]
        assert state.log[0].params == {"enemy": "Bug v1.0"}

    def test_battlers_copied(self, no_crit_rng):
        player = _make_player()
        state = battle.init(player, _make_enemy(), rng=no_crit_rng)
        state.player.hp = 1
        assert player.hp == 100

    def test_default_rng_created(self):
        state = battle.init(_make_player(), _make_enemy())
        new = battle.execute_player_attack(state, "ATTACK")
        assert new.enemy.hp < 30


# ---------------------------------------------------------------------------
# execute_player_attack
# ---------------------------------------------------------------------------

class TestPlayerAttack:
    def test_weak_letter_attack(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(), rng=no_crit_rng)
        new = battle.execute_player_attack(state, "ATTACK")

        assert new.enemy.hp == 13
        assert new.turn == "enemy"
        assert new.log_keys == [
            "battle.encounter", "battle.player_attack", "battle.weak_hit",
        ]
        assert new.log[1].params["damage"] == 17
        assert new.log[2].params == {"hits": 3, "bonus": 6}

    def test_input_state_unchanged(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(), rng=no_crit_rng)
        new = battle.execute_player_attack(state, "ATTACK")

        assert new is not state
        assert state.enemy.hp == 30
        assert state.turn == "player"
        assert len(state.log) == 1

    def test_critical_logged_before_attack(self, always_crit_rng):
        state = battle.init(_make_player(), _make_enemy(), rng=always_crit_rng)
        new = battle.execute_player_attack(state, "ATTACK")

        assert new.enemy.hp == 5  # 30 - floor(17 * 1.5)
        assert new.log_keys[1:3] == ["battle.critical", "battle.player_attack"]

    def test_one_roll_per_attack(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(), rng=no_crit_rng)
        battle.execute_player_attack(state, "ATTACK")
        assert no_crit_rng.calls == 1

    def test_killing_blow_finishes_battle(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(hp=10), rng=no_crit_rng)
        new = battle.execute_player_attack(state, "ATTACK")

        assert new.enemy.hp == 0
        assert new.is_finished
        assert new.winner == "player"
        assert new.log_keys[-1] == "battle.enemy_defeated"

    def test_overkill_clamped(self, always_crit_rng):
        state = battle.init(_make_player(atk=500), _make_enemy(), rng=always_crit_rng)
        new = battle.execute_player_attack(state, "ATTACK")
        assert new.enemy.hp == 0

    def test_trait_heal(self, no_crit_rng):
        player = _make_player(hp=90, traits={"A": 1})
        state = battle.init(player, _make_enemy(), rng=no_crit_rng)
        new = battle.execute_player_attack(state, "ATTACK")

        assert new.player.hp == 95
        heal_entries = [e for e in new.log if e.key == "battle.trait_heal"]
        assert heal_entries[0].params == {"amount": 5}

    def test_trait_heal_capped(self, no_crit_rng):
        player = _make_player(hp=99, traits={"A": 1})
        state = battle.init(player, _make_enemy(), rng=no_crit_rng)
        new = battle.execute_player_attack(state, "ATTACK")
        assert new.player.hp == 100

    def test_trait_en(self, no_crit_rng):
        player = _make_player(en=40, traits={"T": 1})
        state = battle.init(player, _make_enemy(), rng=no_crit_rng)
        new = battle.execute_player_attack(state, "TEXT")

        assert new.player.en == 45
        assert "battle.trait_en" in new.log_keys

    def test_no_trait_entries_without_traits(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(), rng=no_crit_rng)
        new = battle.execute_player_attack(state, "ATTACK")
        assert "battle.trait_heal" not in new.log_keys
        assert "battle.trait_en" not in new.log_keys

    def test_no_weak_entry_without_weak_hits(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(), rng=no_crit_rng)
        new = battle.execute_player_attack(state, "ZIP")
        assert "battle.weak_hit" not in new.log_keys

    def test_wrong_turn_returns_same_state(self):
        state = _enemy_turn_state()
        assert battle.execute_player_attack(state, "ATTACK") is state

    def test_finished_battle_returns_same_state(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(hp=10), rng=no_crit_rng)
        done = battle.execute_player_attack(state, "ATTACK")
        assert battle.execute_player_attack(done, "ATTACK") is done
        assert battle.execute_enemy_turn(done) is done


# ---------------------------------------------------------------------------
# execute_skill
# ---------------------------------------------------------------------------

class TestSkills:
    def test_overload_unaffordable_is_noop(self, no_crit_rng):
        state = battle.init(_make_player(en=19), _make_enemy(), rng=no_crit_rng)
        assert battle.execute_skill(state, "overload") is state

    def test_overload_lethal(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(), rng=no_crit_rng)
        new = battle.execute_skill(state, "overload")

        assert new.player.en == 30
        assert new.enemy.hp == 0
        assert new.is_finished
        assert new.winner == "player"
        assert new.log_keys[-2:] == ["battle.skill_damage", "battle.enemy_defeated"]
        assert new.log[-2].params == {"skill": "OVERLOAD", "damage": 30}

    def test_overload_non_lethal_keeps_turn(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(hp=100, max_hp=100), rng=no_crit_rng)
        new = battle.execute_skill(state, "overload")

        assert new.enemy.hp == 50
        assert new.turn == "player"
        assert not new.is_finished

    def test_repair(self, no_crit_rng):
        state = battle.init(_make_player(hp=50), _make_enemy(), rng=no_crit_rng)
        new = battle.execute_skill(state, "heal")

        assert new.player.hp == 80
        assert new.player.en == 40
        assert new.log[-1].params == {"skill": "REPAIR", "amount": 30}
        assert state.player.hp == 50

    def test_repair_capped(self, no_crit_rng):
        state = battle.init(_make_player(hp=90), _make_enemy(), rng=no_crit_rng)
        new = battle.execute_skill(state, "heal")
        assert new.player.hp == 100
        assert new.log[-1].params["amount"] == 10

    def test_shield(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(), rng=no_crit_rng)
        new = battle.execute_skill(state, "shield")

        assert new.player.shield == 1
        assert new.player.en == 35
        assert new.turn == "player"
        assert state.player.shield == 0

    def test_scan_reveals_weak_letters(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(), rng=no_crit_rng)
        new = battle.execute_skill(state, "scan")

        assert new.player.en == 45
        assert new.log[-1].key == "battle.skill_scan"
        assert new.log[-1].params["letters"] == "A, K"

    def test_unknown_skill_is_noop(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(), rng=no_crit_rng)
        assert battle.execute_skill(state, "fireball") is state

    def test_skill_on_enemy_turn_is_noop(self):
        state = _enemy_turn_state()
        assert battle.execute_skill(state, "heal") is state

    def test_skills_do_not_roll(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(hp=100, max_hp=100), rng=no_crit_rng)
        battle.execute_skill(state, "overload")
        assert no_crit_rng.calls == 0


# ---------------------------------------------------------------------------
# execute_enemy_turn
# ---------------------------------------------------------------------------

class TestEnemyTurn:
    def test_flat_damage(self):
        new = battle.execute_enemy_turn(_enemy_turn_state())

        assert new.player.hp == 92
        assert new.turn == "player"
        assert new.log[-1].key == "battle.enemy_attack"
        assert new.log[-1].params == {"enemy": "Bug v1.0", "damage": 8}

    def test_shield_blocks_and_resets(self):
        state = _enemy_turn_state(player=_make_player(shield=1))
        new = battle.execute_enemy_turn(state)

        assert new.player.hp == 100
        assert new.player.shield == 0
        assert new.log[-1].key == "battle.shield_block"
        assert state.player.shield == 1

    def test_shield_lasts_one_attack(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(hp=100, max_hp=100), rng=no_crit_rng)
        state = battle.execute_skill(state, "shield")
        state = battle.execute_player_attack(state, "ZIP")
        state = battle.execute_enemy_turn(state)
        assert state.player.hp == 100
        state = battle.execute_player_attack(state, "ZIP")
        state = battle.execute_enemy_turn(state)
        assert state.player.hp == 92

    def test_player_defeated(self):
        state = _enemy_turn_state(player=_make_player(hp=5))
        new = battle.execute_enemy_turn(state)

        assert new.player.hp == 0
        assert new.is_finished
        assert new.winner == "enemy"
        assert new.log_keys[-1] == "battle.player_defeated"

    def test_wrong_turn_returns_same_state(self, no_crit_rng):
        state = battle.init(_make_player(), _make_enemy(), rng=no_crit_rng)
        assert battle.execute_enemy_turn(state) is state


# ---------------------------------------------------------------------------
# Invariants over random play
# ---------------------------------------------------------------------------

class TestRandomPlay:
    @pytest.mark.parametrize("seed", range(20))
    def test_vitals_stay_in_range(self, seed):
        rng = GameRNG(seed)
        words = word_targets()
        player = _make_player(traits={"A": 2, "T": 1, "K": 1})
        state = battle.init(player, _make_enemy(hp=200, max_hp=200, atk=6), rng=rng.fork("battle"))

        for _ in range(300):
            if state.is_finished:
                break
            if state.turn == "enemy":
                state = battle.execute_enemy_turn(state)
            elif rng.random_float() < 0.3:
                state = battle.execute_skill(
                    state, rng.random_choice(["heal", "shield", "scan", "overload", "nope"]),
                )
            else:
                state = battle.execute_player_attack(state, rng.random_choice(words))

            for b in (state.player, state.enemy):
                assert 0 <= b.hp <= b.max_hp
            assert 0 <= state.player.en <= state.player.max_en
            assert state.player.shield in (0, 1)

        assert state.is_finished
        assert (state.winner == "player") == state.enemy.is_dead
