"""Game session -- drives floors, movement, battles and the shop.

Holds the persistent state of one playthrough (floor, player, current map
and position) between dungeon and battle phases.  The engines are used only
through their public entry points: one ``DungeonGenerator.generate`` call
per floor, and ``battle.init`` followed by the turn transitions.
"""

from __future__ import annotations

import logging
import random
from enum import Enum

from termicrawler import battle as battle_system
from termicrawler.content.shop import SHOP_ITEMS_BY_ID, ShopItemType
from termicrawler.content.words import COMBAT_WORDS, word_targets
from termicrawler.core.battle_state import BattleState
from termicrawler.core.entities import Battler, Position
from termicrawler.core.rng import GameRNG
from termicrawler.dungeon.generator import CellType, DungeonGenerator, DungeonMap
from termicrawler.dungeon.markers import clear_marker, place_markers
from termicrawler.game.config import GameConfig
from termicrawler.game.encounters import build_enemy, build_player_battler
from termicrawler.game.progression import VictoryReward, apply_victory
from termicrawler.game.save import GameSaveData
from termicrawler.mechanics.energy import restore_energy

logger = logging.getLogger(__name__)

_KNOWN_WORDS = frozenset(w.target for w in COMBAT_WORDS)


class MoveOutcome(str, Enum):
    BLOCKED = "blocked"
    MOVED = "moved"
    ENCOUNTER = "encounter"
    SHOP = "shop"
    EXIT = "exit"


class GameSession:
    """One playthrough.

    Parameters
    ----------
    config:
        Session tunables.  Defaults to :class:`GameConfig` defaults.
    seed:
        Master seed.  Floors, markers, encounters and battles each use a
        stream forked from it.
    """

    def __init__(self, config: GameConfig | None = None, seed: int | None = None) -> None:
        self.config = config or GameConfig()
        self.seed = seed if seed is not None else random.randrange(2**32)
        self.rng = GameRNG(self.seed)
        self.generator = DungeonGenerator()

        self._encounter_rng = self.rng.fork("encounters")
        self._battle_rng = self.rng.fork("battles")

        self.floor = 0
        self.player: Battler | None = None
        self.dungeon: DungeonMap | None = None
        self.position: Position | None = None

        self.battle: BattleState | None = None
        self._battle_marker: Position | None = None
        self.shop_open = False
        self.game_over = False
        self.excluded_words: set[str] = set()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def new_game(self) -> None:
        self.player = self.config.initial_player()
        self.game_over = False
        self.enter_floor(1)

    def floor_seed(self, floor: int) -> int:
        """Generator seed for *floor*; stable for a given session seed."""
        return self.rng.fork(f"floor:{floor}").random_int(0, 2**31 - 1)

    def enter_floor(self, floor: int) -> DungeonMap:
        """Generate *floor*, place its markers and put the player on the start."""
        self.floor = floor
        self.dungeon = self.generator.generate(
            self.config.map_width, self.config.map_height, self.floor_seed(floor),
        )
        place_markers(
            self.dungeon,
            self.rng.fork(f"markers:{floor}"),
            enemies=self.config.enemy_markers,
            shops=self.config.shop_markers,
        )
        self.position = self.dungeon.start_pos
        self.shop_open = False
        logger.debug("Entered floor %d with %d rooms", floor, len(self.dungeon.rooms))
        return self.dungeon

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def move(self, dx: int, dy: int) -> MoveOutcome:
        """Step the player by ``(dx, dy)`` and report what happened."""
        if self.dungeon is None or self.position is None:
            raise RuntimeError("no floor loaded; call new_game() first")
        if self.battle is not None or self.game_over:
            logger.warning("move called while a battle is active or the game is over")
            return MoveOutcome.BLOCKED

        target = self.position.offset(dx, dy)
        if not self.dungeon.is_walkable(target):
            return MoveOutcome.BLOCKED

        self.position = target
        self.shop_open = False
        cell = self.dungeon.cell_at(target)

        if cell == CellType.EXIT:
            self.enter_floor(self.floor + 1)
            return MoveOutcome.EXIT

        if cell == CellType.SHOP:
            clear_marker(self.dungeon, target)
            self.shop_open = True
            return MoveOutcome.SHOP

        if cell == CellType.ENEMY:
            self.start_battle(marker=target)
            return MoveOutcome.ENCOUNTER

        if self._encounter_rng.random_float() < self.config.encounter_rate:
            self.start_battle()
            return MoveOutcome.ENCOUNTER

        return MoveOutcome.MOVED

    # ------------------------------------------------------------------
    # Battles
    # ------------------------------------------------------------------

    def start_battle(self, marker: Position | None = None) -> BattleState:
        enemy = build_enemy(self.floor, self._encounter_rng)
        self.battle = battle_system.init(
            build_player_battler(self.player), enemy, rng=self._battle_rng,
        )
        self._battle_marker = marker
        return self.battle

    def resolve_battle(self, state: BattleState) -> VictoryReward | None:
        """Fold a finished battle back into the persistent player.

        Returns the victory reward, or ``None`` if the player lost.
        """
        if not state.is_finished:
            raise ValueError("cannot resolve a battle that is still running")

        self.player.hp = state.player.hp
        if self.player.has_energy_pool and state.player.en is not None:
            self.player.en = min(state.player.en, self.player.max_en)

        marker = self._battle_marker
        self.battle = None
        self._battle_marker = None

        if state.winner != "player":
            self.game_over = True
            logger.info("Player defeated on floor %d", self.floor)
            return None

        if marker is not None:
            clear_marker(self.dungeon, marker)
        return apply_victory(self.player, self.floor)

    # ------------------------------------------------------------------
    # Shop
    # ------------------------------------------------------------------

    def purchase(self, item_id: str) -> bool:
        """Buy *item_id* from the open shop.  Returns ``False`` if the shop is
        closed, the item is unknown, or the player cannot pay."""
        if not self.shop_open:
            logger.warning("purchase(%r) with no shop open", item_id)
            return False
        item = SHOP_ITEMS_BY_ID.get(item_id)
        if item is None:
            logger.warning("Unknown shop item %r", item_id)
            return False
        if (self.player.credits or 0) < item.cost:
            return False

        self.player.credits -= item.cost
        if item.item_type == ShopItemType.TRAIT:
            self.player.traits[item.id] = self.player.traits.get(item.id, 0) + 1
        else:
            self.player.heal(item.hp_restore)
            restore_energy(self.player, item.en_restore)
        return True

    # ------------------------------------------------------------------
    # Word list
    # ------------------------------------------------------------------

    def exclude_word(self, word: str) -> bool:
        """Permanently drop *word* from the battle word list.

        Returns ``False`` for an unknown or already excluded word, and when
        it is the last word left to type.
        """
        if word not in _KNOWN_WORDS:
            logger.warning("Unknown word %r, not excluded", word)
            return False
        if word in self.excluded_words:
            return False
        if len(self.battle_words()) <= 1:
            return False
        self.excluded_words.add(word)
        return True

    def battle_words(self) -> list[str]:
        return word_targets(self.excluded_words)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_save(self, language: str = "ja") -> GameSaveData:
        return GameSaveData(
            floor=self.floor,
            player=self.player.model_copy(deep=True),
            seed=self.seed,
            language=language,
            excluded_words=sorted(self.excluded_words),
        )

    @classmethod
    def from_save(cls, data: GameSaveData, config: GameConfig | None = None) -> GameSession:
        """Resume a session.  The saved floor is regenerated from the seed."""
        session = cls(config=config, seed=data.seed)
        session.player = data.player.model_copy(deep=True)
        session.excluded_words = set(data.excluded_words)
        session.enter_floor(data.floor)
        return session
