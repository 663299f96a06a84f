"""Supply depot stock: consumable items and trait upgrades."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ShopItemType(str, Enum):
    ITEM = "item"
    TRAIT = "trait"


class ShopItem(BaseModel):
    """One purchasable entry."""

    id: str
    """Item id, or the trait letter for trait upgrades."""

    name: str
    cost: int
    description: str
    item_type: ShopItemType
    hp_restore: int = 0
    en_restore: int = 0


SHOP_ITEMS: list[ShopItem] = [
    ShopItem(
        id="hp_restore", name="EMERGENCY REPAIR", cost=50,
        description="Restores 50 HP", item_type=ShopItemType.ITEM, hp_restore=50,
    ),
    ShopItem(
        id="en_restore", name="ENERGY CELL", cost=30,
        description="Restores 30 EN", item_type=ShopItemType.ITEM, en_restore=30,
    ),
    ShopItem(
        id="A", name="Absorb", cost=100,
        description="Heal on hit", item_type=ShopItemType.TRAIT,
    ),
    ShopItem(
        id="C", name="Critical", cost=150,
        description="Crit chance up", item_type=ShopItemType.TRAIT,
    ),
    ShopItem(
        id="E", name="Energy", cost=100,
        description="Restore EN", item_type=ShopItemType.TRAIT,
    ),
    ShopItem(
        id="S", name="Strike", cost=200,
        description="Crit chance up", item_type=ShopItemType.TRAIT,
    ),
]

SHOP_ITEMS_BY_ID: dict[str, ShopItem] = {item.id: item for item in SHOP_ITEMS}
