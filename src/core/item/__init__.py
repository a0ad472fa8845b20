"""아이템 시스템 Core — 순수 Python, DB 무관"""

from .models import InventoryEntry, Item, Weapon, make_weapon, unarmed
from .inventory import format_item_names, weapon_indices
from .equip import equip_swap
from .trade import TradeResult, buy, sell

__all__ = [
    "InventoryEntry",
    "Item",
    "Weapon",
    "make_weapon",
    "unarmed",
    "format_item_names",
    "weapon_indices",
    "equip_swap",
    "TradeResult",
    "buy",
    "sell",
]
