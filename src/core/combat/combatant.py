"""전투 참가자 능력 인터페이스

Combatant: 이름 + 스탯 조회
Attacker: damage() — 기본 0
Defender: defense() — 기본 0, take_damage() 필수

Player/Enemy는 Attacker와 Defender를 모두 구현한다.
"""

from abc import ABC, abstractmethod

from src.core.stats import Stats


class Combatant(ABC):
    """전투 참가자 공통 인터페이스"""

    name: str

    @abstractmethod
    def get_stats(self) -> Stats:
        """현재 스탯"""
        ...


class Attacker(Combatant):
    """공격 능력"""

    def damage(self) -> int:
        """방어 적용 전 공격력"""
        return 0


class Defender(Combatant):
    """방어/피격 능력"""

    health: int

    def defense(self) -> int:
        return 0

    @abstractmethod
    def take_damage(self, amount: int) -> None:
        """체력 감소. 0 미만 하한 없음 (1 미만 = 패배)."""
        ...

    def is_defeated(self) -> bool:
        return self.health < 1
