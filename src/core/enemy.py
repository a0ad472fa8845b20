"""적 엔티티 — 카탈로그 템플릿에서 조우마다 생성"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from src.core.combat.combatant import Attacker, Defender
from src.core.item.models import Weapon, make_weapon
from src.core.stats import Stats

TEMPLATE_HEALTH = 100


@dataclass
class Enemy(Attacker, Defender):
    name: str
    stats: Stats = field(default_factory=Stats)
    health: int = TEMPLATE_HEALTH
    weapon: Optional[Weapon] = None

    def with_stats(self, physique: int, technique: int, mystique: int) -> Enemy:
        """스탯 재설정 + 체력을 새 max_health로. 무기는 해제된다."""
        stats = Stats(physique, technique, mystique)
        return Enemy(name=self.name, stats=stats, health=stats.max_health())

    def with_weapon(
        self,
        weapon: str,
        physique_scale: float,
        technique_scale: float,
        mystique_scale: float,
        weight: float,
        value: int,
    ) -> Enemy:
        """무기 장착 사본. 스탯/체력은 유지."""
        return replace(
            self,
            weapon=make_weapon(
                weapon, weight, value, physique_scale, technique_scale, mystique_scale
            ),
        )

    def get_stats(self) -> Stats:
        return self.stats

    def damage(self) -> int:
        # 무기는 아직 피해량에 반영하지 않음
        return self.stats.physique

    def defense(self) -> int:
        # 스탯이 아니라 이름 길이(UTF-8 바이트) 기반
        return len(self.name.encode("utf-8")) // 2

    def take_damage(self, amount: int) -> None:
        self.health -= amount

    def __str__(self) -> str:
        return f"Enemy{{ name: {self.name}, stats:{self.stats} }}"
