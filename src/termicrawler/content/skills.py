"""Skill definitions -- energy-costed actions that do not end the turn."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class SkillEffectType(str, Enum):
    HEAL = "heal"
    SHIELD = "shield"
    SCAN = "scan"
    DAMAGE = "damage"


class SkillDefinition(BaseModel):
    """Complete definition of a single skill."""

    id: str
    name: str
    """Display name shown on the skill button."""

    cost: int
    """Energy spent when the skill is used."""

    description: str
    effect_type: SkillEffectType
    value: int | None = None
    """Magnitude for ``heal`` and ``damage`` skills; unused otherwise."""


SKILLS: list[SkillDefinition] = [
    SkillDefinition(
        id="heal", name="REPAIR", cost=10, description="Restore 30 HP",
        effect_type=SkillEffectType.HEAL, value=30,
    ),
    SkillDefinition(
        id="shield", name="SHIELD", cost=15, description="Block next attack",
        effect_type=SkillEffectType.SHIELD,
    ),
    SkillDefinition(
        id="scan", name="SCAN", cost=5, description="Reveal weak letters",
        effect_type=SkillEffectType.SCAN,
    ),
    SkillDefinition(
        id="overload", name="OVERLOAD", cost=20, description="Deal 50 DMG",
        effect_type=SkillEffectType.DAMAGE, value=50,
    ),
]

SKILLS_BY_ID: dict[str, SkillDefinition] = {s.id: s for s in SKILLS}


def get_skill(skill_id: str) -> SkillDefinition | None:
    return SKILLS_BY_ID.get(skill_id)
