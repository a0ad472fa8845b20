"""Combat Resolver — 공격 1회 판정 및 피해 적용

공식: raw = attacker.damage() - defender.defense()
  raw > 0 → raw 적용
  raw <= 0 → 최소 피해 1 적용

무작위 요소 없음. 사망 판정은 호출자가 health < 1로 확인.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.combat.combatant import Attacker, Defender
from src.core.logging import get_logger

logger = get_logger(__name__)

MIN_DAMAGE = 1


@dataclass(frozen=True)
class BattleOutcome:
    """교전 1회 결과 리포트 (저장 대상 아님)"""

    attacker: Attacker
    defender: Defender
    damage: int

    def __str__(self) -> str:
        return (
            f"{self.attacker.name} attacked {self.defender.name}, "
            f"for {self.damage} damage!"
        )


def calculate_damage(attacker: Attacker, defender: Defender) -> int:
    """적용될 피해량 (항상 1 이상). 상태 변경 없음."""
    raw = attacker.damage() - defender.defense()
    if raw > 0:
        return raw
    return MIN_DAMAGE


def resolve(attacker: Attacker, defender: Defender) -> BattleOutcome:
    """공격 판정 후 defender 체력 감소."""
    damage = calculate_damage(attacker, defender)
    defender.take_damage(damage)
    logger.debug(
        "%s -> %s: %d damage (defender hp=%d)",
        attacker.name,
        defender.name,
        damage,
        defender.health,
    )
    return BattleOutcome(attacker=attacker, defender=defender, damage=damage)
