"""Entity models shared by the dungeon and battle engines.

All data classes use Pydantic v2 BaseModel for validation and
serialization.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator


# ---------------------------------------------------------------------------
# Position
# ---------------------------------------------------------------------------

class Position(BaseModel):
    """Grid coordinate.  Origin top-left, ``x`` grows right, ``y`` grows down."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Position:
        return Position(x=self.x + dx, y=self.y + dy)


# ---------------------------------------------------------------------------
# Battler
# ---------------------------------------------------------------------------

class Battler(BaseModel):
    """Either side of a battle: the player or an enemy."""

    name: str
    is_player: bool = False

    hp: int
    max_hp: int
    en: int | None = None
    """Current energy.  ``None`` means this battler has no energy pool."""

    max_en: int | None = None
    atk: int = 0

    # Player progression -- ``None`` on enemies.
    level: int | None = None
    exp: int | None = None
    credits: int | None = None

    traits: dict[str, int] = Field(default_factory=dict)
    """Maps an uppercase letter to its trait level.  Absent means the
    trait has not been acquired yet."""

    weak_letters: list[str] | None = None
    """Uppercase letters this battler takes bonus damage from."""

    shield: int = 0
    """1 while a shield is up.  Lasts for one incoming enemy attack."""

    # -- validation ----------------------------------------------------------

    @field_validator("traits")
    @classmethod
    def _check_trait_keys(cls, v: dict[str, int]) -> dict[str, int]:
        for letter, level in v.items():
            if len(letter) != 1 or not letter.isupper():
                raise ValueError(f"trait key must be one uppercase letter, got {letter!r}")
            if level < 0:
                raise ValueError(f"trait level must be >= 0, got {level} for {letter!r}")
        return v

    @field_validator("weak_letters")
    @classmethod
    def _normalise_weak_letters(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return None
        return [letter.upper() for letter in v]

    @model_validator(mode="after")
    def _check_vitals(self) -> Battler:
        if not 0 <= self.hp <= self.max_hp:
            raise ValueError(f"hp must be within [0, {self.max_hp}], got {self.hp}")
        if self.en is not None:
            if self.max_en is None:
                raise ValueError("en is set but max_en is missing")
            if not 0 <= self.en <= self.max_en:
                raise ValueError(f"en must be within [0, {self.max_en}], got {self.en}")
        if self.shield not in (0, 1):
            raise ValueError(f"shield must be 0 or 1, got {self.shield}")
        return self

    # -- queries -------------------------------------------------------------

    @property
    def is_dead(self) -> bool:
        return self.hp <= 0

    @property
    def has_energy_pool(self) -> bool:
        return self.en is not None and self.max_en is not None

    def trait_level(self, letter: str) -> int:
        """Return the level of the trait keyed by *letter*, ``0`` if absent."""
        return self.traits.get(letter.upper(), 0)

    # -- vitals --------------------------------------------------------------

    def take_damage(self, amount: int) -> int:
        """Lower HP by *amount*, floored at 0.  Returns the HP actually lost."""
        if amount <= 0:
            return 0
        hp_lost = min(self.hp, amount)
        self.hp -= hp_lost
        return hp_lost

    def heal(self, amount: int) -> int:
        """Heal *amount* HP, capped at ``max_hp``.  Returns the HP gained."""
        if amount <= 0:
            return 0
        gained = min(self.max_hp - self.hp, amount)
        self.hp += gained
        return gained
