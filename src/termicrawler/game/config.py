"""Tunables for a game session."""

from __future__ import annotations

from pydantic import BaseModel, Field

from termicrawler.core.entities import Battler


class GameConfig(BaseModel):
    """Session-level settings.  Engine constants live beside the engines."""

    map_width: int = Field(default=30, ge=16)
    map_height: int = Field(default=20, ge=16)

    encounter_rate: float = Field(default=0.05, ge=0.0, le=1.0)
    """Chance of a random battle on each successful step."""

    enemy_markers: int = Field(default=3, ge=0)
    shop_markers: int = Field(default=1, ge=0)

    # Starting player
    player_name: str = "Player"
    player_hp: int = 100
    player_en: int = 50
    player_atk: int = 10

    def initial_player(self) -> Battler:
        return Battler(
            name=self.player_name,
            is_player=True,
            hp=self.player_hp,
            max_hp=self.player_hp,
            en=self.player_en,
            max_en=self.player_en,
            atk=self.player_atk,
            level=1,
            exp=0,
            credits=0,
        )
