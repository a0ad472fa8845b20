"""인벤토리 조회/무게 관리"""

from __future__ import annotations

from .models import InventoryEntry, is_weapon


def weapon_indices(inventory: list[InventoryEntry]) -> list[int]:
    """무기가 있는 인벤토리 인덱스 목록 (순서 유지)."""
    return [n for n, entry in enumerate(inventory) if is_weapon(entry)]


def format_item_names(inventory: list[InventoryEntry]) -> str:
    """'Sword, Bow' 형식. 비어 있으면 "None"."""
    if not inventory:
        return "None"
    return ", ".join(entry.name for entry in inventory)


def calculate_current_weight(inventory: list[InventoryEntry]) -> float:
    return sum(entry.weight for entry in inventory)


def can_add_item(current_weight: float, capacity: int, item_weight: float) -> bool:
    """아이템 추가 가능 여부"""
    return current_weight + item_weight <= capacity
