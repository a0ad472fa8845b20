"""
Stat Model
==========
3대 기본 스탯 (Physique, Technique, Mystique) 과 파생 수치.

파생 수치는 캐시하지 않고 호출할 때마다 다시 계산한다.
스탯이 바뀌면 즉시 반영되어야 하기 때문.
"""

from __future__ import annotations

from dataclasses import dataclass

BASE_RESOURCE = 20
BASE_CARRY_CAPACITY = 10


@dataclass
class Stats:
    """캐릭터/적 공통 스탯 (모두 0 이상의 정수)"""

    physique: int = 0  # 물리 - 근접 전투, 체력
    technique: int = 0  # 기술 - 민첩, 선공 판정
    mystique: int = 0  # 신비 - 마법, 마나

    def max_health(self) -> int:
        return self.physique * 5 + self.technique * 3 + self.mystique * 4 + BASE_RESOURCE

    def max_stamina(self) -> int:
        return self.physique * 4 + self.technique * 5 + self.mystique * 3 + BASE_RESOURCE

    def max_mana(self) -> int:
        return self.physique * 3 + self.technique * 4 + self.mystique * 5 + BASE_RESOURCE

    def carry_capacity(self) -> int:
        return BASE_CARRY_CAPACITY + self.physique * 5

    def total(self) -> int:
        """스탯 합계 (캐릭터 생성 포인트 검증용)"""
        return self.physique + self.technique + self.mystique

    def __str__(self) -> str:
        return (
            f"Physique: {self.physique}, Technique: {self.technique}, "
            f"Mystique: {self.mystique}"
        )


STAT_NAMES: tuple[str, ...] = ("Physique", "Technique", "Mystique")


def allocate_point(stats: Stats, index: int) -> Stats:
    """캐릭터 생성 시 포인트 1개 배분.

    index: 0=Physique, 1=Technique, 그 외=Mystique
    """
    if index == 0:
        stats.physique += 1
    elif index == 1:
        stats.technique += 1
    else:
        stats.mystique += 1
    return stats
