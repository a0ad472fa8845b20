"""아이템 도메인 모델 (DB 무관)"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from src.core.combat.combatant import Combatant

UNARMED_NAME = "Hands"


@dataclass(frozen=True)
class Item:
    """일반 아이템 — 불변. 이름은 표시용 (고유 ID 아님)"""

    name: str
    weight: float  # kg
    value: int  # 거래가

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Weapon:
    """무기 = Item + 스탯 스케일.

    damage = int(P*physique_scale + T*technique_scale + M*mystique_scale)
    int()는 0 방향 절사.
    """

    item: Item
    physique_scale: float = 1.0
    technique_scale: float = 1.0
    mystique_scale: float = 1.0

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def value(self) -> int:
        return self.item.value

    @property
    def weight(self) -> float:
        return self.item.weight

    def damage(self, attacker: "Combatant") -> int:
        """공격자의 현재 스탯 기준 피해량."""
        stats = attacker.get_stats()
        return int(
            self.physique_scale * stats.physique
            + self.technique_scale * stats.technique
            + self.mystique_scale * stats.mystique
        )

    def normalized(self) -> Weapon:
        """스케일을 1.0/1.0/1.0으로 재설정한 사본 (장착 시 사용)."""
        return replace(
            self, physique_scale=1.0, technique_scale=1.0, mystique_scale=1.0
        )

    def __str__(self) -> str:
        return (
            f"{self.item}, Physique: {self.physique_scale}, "
            f"Technique: {self.technique_scale}, Mystique: {self.mystique_scale}, "
            f"Value: {self.item.value}, Weight: {self.item.weight}"
        )


# 인벤토리 항목: Item 또는 Weapon (삽입 순서 유지)
InventoryEntry = Union[Item, Weapon]


def make_weapon(
    name: str,
    weight: float,
    value: int,
    physique_scale: float,
    technique_scale: float,
    mystique_scale: float,
) -> Weapon:
    return Weapon(
        item=Item(name=name, weight=float(weight), value=int(value)),
        physique_scale=float(physique_scale),
        technique_scale=float(technique_scale),
        mystique_scale=float(mystique_scale),
    )


def unarmed() -> Weapon:
    """맨손 — 무게/가치 0, 스케일 1/1/1"""
    return make_weapon(UNARMED_NAME, 0.0, 0, 1.0, 1.0, 1.0)


def is_weapon(entry: InventoryEntry) -> bool:
    return isinstance(entry, Weapon)
