"""Game module -- session orchestration, encounters, progression and saves."""

from termicrawler.game.config import GameConfig
from termicrawler.game.encounters import build_enemy, build_player_battler, roll_weak_letters
from termicrawler.game.progression import (
    VictoryReward,
    apply_victory,
    credits_for_floor,
    exp_to_next_level,
    level_up,
)
from termicrawler.game.save import (
    GameSaveData,
    SaveError,
    export_save,
    import_save,
    load_game,
    save_game,
)
from termicrawler.game.session import GameSession, MoveOutcome

__all__ = [
    "GameConfig",
    "GameSession",
    "MoveOutcome",
    "build_enemy",
    "build_player_battler",
    "roll_weak_letters",
    "VictoryReward",
    "apply_victory",
    "credits_for_floor",
    "exp_to_next_level",
    "level_up",
    "GameSaveData",
    "SaveError",
    "export_save",
    "import_save",
    "load_game",
    "save_game",
]
