"""Letter traits -- permanent upgrades keyed by a single letter.

When the player types a word containing a letter whose trait they own, the
trait's effect is added to that attack.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class TraitEffectType(str, Enum):
    """Which bucket a trait's value is aggregated into."""

    HEAL = "heal"
    EN_RESTORE = "en_restore"
    CRIT_RATE = "crit_rate"
    DAMAGE_UP = "damage_up"
    DEFENSE_UP = "defense_up"


class TraitDefinition(BaseModel):
    """Static definition of one letter trait."""

    char: str
    """The uppercase letter this trait is keyed by."""

    name: str
    description: str
    effect_type: TraitEffectType
    base_value: float
    """Value contributed by one occurrence of the letter, before level
    scaling."""


def _trait(char: str, name: str, description: str, effect: TraitEffectType, base: float) -> TraitDefinition:
    return TraitDefinition(
        char=char, name=name, description=description, effect_type=effect, base_value=base,
    )


_HEAL = TraitEffectType.HEAL
_EN = TraitEffectType.EN_RESTORE
_CRIT = TraitEffectType.CRIT_RATE
_DMG = TraitEffectType.DAMAGE_UP
_DEF = TraitEffectType.DEFENSE_UP

LETTER_TRAITS: dict[str, TraitDefinition] = {
    t.char: t
    for t in [
        _trait("A", "Absorb", "HP Recovery", _HEAL, 2),
        _trait("B", "Barrier", "Defense Up", _DEF, 1),
        _trait("C", "Critical", "Crit Rate Up", _CRIT, 0.05),
        _trait("D", "Damage", "Damage Up", _DMG, 2),
        _trait("E", "Energy", "EN Recovery", _EN, 2),
        _trait("F", "Force", "Damage Up", _DMG, 2),
        _trait("G", "Guard", "Defense Up", _DEF, 1),
        _trait("H", "Heal", "HP Recovery", _HEAL, 2),
        _trait("I", "Impulse", "Crit Rate Up", _CRIT, 0.05),
        _trait("J", "Jolt", "EN Recovery", _EN, 2),
        _trait("K", "Kinetic", "Damage Up", _DMG, 2),
        _trait("L", "Life", "HP Recovery", _HEAL, 2),
        _trait("M", "Mana", "EN Recovery", _EN, 2),
        _trait("N", "Nullify", "Defense Up", _DEF, 1),
        _trait("O", "Overload", "Damage Up", _DMG, 3),
        _trait("P", "Power", "Damage Up", _DMG, 2),
        _trait("Q", "Quick", "Crit Rate Up", _CRIT, 0.08),
        _trait("R", "Recover", "HP Recovery", _HEAL, 2),
        _trait("S", "Strike", "Crit Rate Up", _CRIT, 0.05),
        _trait("T", "Tech", "EN Recovery", _EN, 2),
        _trait("U", "Unit", "Defense Up", _DEF, 1),
        _trait("V", "Vitality", "HP Recovery", _HEAL, 2),
        _trait("W", "Weapon", "Damage Up", _DMG, 2),
        _trait("X", "X-Factor", "Crit Rate Up", _CRIT, 0.1),
        _trait("Y", "Yield", "EN Recovery", _EN, 2),
        _trait("Z", "Zero", "Damage Up", _DMG, 4),
    ]
}


def get_trait(letter: str) -> TraitDefinition | None:
    """Return the trait keyed by *letter* (case-insensitive), or ``None``."""
    return LETTER_TRAITS.get(letter.upper())
