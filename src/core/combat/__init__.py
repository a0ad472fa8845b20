"""전투 시스템 Core — 능력 인터페이스, 판정, 전투 루프"""

from .combatant import Attacker, Combatant, Defender
from .resolver import BattleOutcome, calculate_damage, resolve
from .battle import (
    Battle,
    BattleAction,
    BattleState,
    attack_round,
    check_state,
)

__all__ = [
    "Attacker",
    "Combatant",
    "Defender",
    "BattleOutcome",
    "calculate_damage",
    "resolve",
    "Battle",
    "BattleAction",
    "BattleState",
    "attack_round",
    "check_state",
]
