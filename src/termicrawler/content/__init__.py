"""Static game content: letter traits, skills, shop stock and combat words.

Everything here is pure lookup data served as Pydantic models.
"""

from .shop import SHOP_ITEMS, SHOP_ITEMS_BY_ID, ShopItem, ShopItemType
from .skills import SKILLS, SKILLS_BY_ID, SkillDefinition, SkillEffectType, get_skill
from .traits import LETTER_TRAITS, TraitDefinition, TraitEffectType, get_trait
from .words import COMBAT_WORDS, CombatWord, word_targets

__all__ = [
    # traits
    "LETTER_TRAITS",
    "TraitDefinition",
    "TraitEffectType",
    "get_trait",
    # skills
    "SKILLS",
    "SKILLS_BY_ID",
    "SkillDefinition",
    "SkillEffectType",
    "get_skill",
    # shop
    "SHOP_ITEMS",
    "SHOP_ITEMS_BY_ID",
    "ShopItem",
    "ShopItemType",
    # words
    "COMBAT_WORDS",
    "CombatWord",
    "word_targets",
]
