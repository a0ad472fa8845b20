"""플레이어 엔티티"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from src.core.combat.combatant import Attacker, Defender
from src.core.item.inventory import (
    calculate_current_weight,
    can_add_item,
    format_item_names,
)
from src.core.item.models import InventoryEntry, Weapon, unarmed
from src.core.stats import Stats

DEFAULT_MONEY = 100
UNSET = "None"


@dataclass
class Player(Attacker, Defender):
    """플레이어 상태.

    세션 동안 상점/장비/전투/스토리에 의해 변경되고,
    캐릭터 생성 및 인트로 전투 이후 세이브 슬롯에 저장된다.
    """

    name: str
    stats: Stats
    health: int
    stamina: int
    mana: int
    location: str = UNSET
    quest: str = UNSET
    money: int = DEFAULT_MONEY
    inventory: list[InventoryEntry] = field(default_factory=list)
    # 장비 교체 중에만 일시적으로 None
    equipped: Optional[Weapon] = field(default_factory=unarmed)
    triggers: dict[str, bool] = field(default_factory=dict)

    @classmethod
    def create(cls, name: str, stats: Stats, money: int = DEFAULT_MONEY) -> Player:
        """새 캐릭터. 체력/스태미나/마나는 최대치로 시작."""
        stats = Stats(stats.physique, stats.technique, stats.mystique)
        return cls(
            name=name,
            stats=stats,
            health=stats.max_health(),
            stamina=stats.max_stamina(),
            mana=stats.max_mana(),
            money=money,
        )

    @classmethod
    def create_random(cls, rng: Optional[random.Random] = None) -> Player:
        """테스트/데모용 랜덤 캐릭터 (각 스탯 1~5)"""
        rng = rng or random.Random()
        stats = Stats(rng.randint(1, 5), rng.randint(1, 5), rng.randint(1, 5))
        return cls.create("Default", stats)

    # === Combatant ===

    def get_stats(self) -> Stats:
        return self.stats

    def damage(self) -> int:
        if self.equipped is None:
            return 1
        return self.equipped.damage(self)

    def defense(self) -> int:
        return self.stats.physique

    def take_damage(self, amount: int) -> None:
        self.health -= amount

    # === 인벤토리 ===

    def item_names(self) -> str:
        return format_item_names(self.inventory)

    def carried_weight(self) -> float:
        return calculate_current_weight(self.inventory)

    def can_carry(self, entry: InventoryEntry) -> bool:
        return can_add_item(
            self.carried_weight(), self.stats.carry_capacity(), entry.weight
        )

    @property
    def has_started_story(self) -> bool:
        return bool(self.triggers)

    def __str__(self) -> str:
        return (
            f"(name: {self.name}, stats: {self.stats}, health: {self.health}, "
            f"stamina: {self.stamina}, mana: {self.mana}, money: {self.money}, "
            f"quest: {self.quest}, location: {self.location}, "
            f"triggered: {self.triggers})"
        )
