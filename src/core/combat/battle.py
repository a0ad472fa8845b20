"""
Battle Loop
===========
턴제 전투 상태 머신.

매 턴:
1. 진입 체크 — player.health < 1 → PLAYER_DEFEATED, enemy.health < 1 → ENEMY_DEFEATED
2. Attack / Item / Flee 선택
   - Attack: technique가 같거나 높은 쪽이 선공 (동률이면 적 선공).
     후공은 선공 교전 이후 health > 0일 때만 반격.
   - Item: 이 조우에서는 사용 불가, 메시지 후 반복
   - Flee: allow_flee=False면 항상 실패 (강제 튜토리얼 전투)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from src.core.choice import ChoicePrompt, clamp_selection
from src.core.combat.resolver import BattleOutcome, resolve
from src.core.logging import get_logger

if TYPE_CHECKING:
    from src.core.enemy import Enemy
    from src.core.player import Player

logger = get_logger(__name__)

ITEM_BLOCKED_MESSAGE = "You dont have any items because you were mugged.."
FLEE_REFUSED_MESSAGE = (
    "You try to flee, but the {enemy} overpowers you, "
    "and forces you to magically fight!"
)
FLEE_SUCCESS_MESSAGE = "You got away safely!"
PLAYER_DEFEATED_MESSAGE = "You died! Game over!"
ENEMY_DEFEATED_MESSAGE = "You win! Enemy died!"


class BattleState(Enum):
    ONGOING = "ongoing"
    PLAYER_DEFEATED = "player_defeated"
    ENEMY_DEFEATED = "enemy_defeated"
    FLED = "fled"  # allow_flee=True 일 때만


class BattleAction(Enum):
    """선택지 인덱스 순서와 동일"""

    ATTACK = 0
    ITEM = 1
    FLEE = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


BATTLE_OPTIONS = [action.label for action in BattleAction]


def check_state(player: "Player", enemy: "Enemy") -> BattleState:
    """진입 체크. 플레이어 패배를 먼저 확인."""
    if player.health < 1:
        return BattleState.PLAYER_DEFEATED
    if enemy.health < 1:
        return BattleState.ENEMY_DEFEATED
    return BattleState.ONGOING


def enemy_strikes_first(player: "Player", enemy: "Enemy") -> bool:
    return enemy.stats.technique >= player.stats.technique


def attack_round(player: "Player", enemy: "Enemy") -> list[BattleOutcome]:
    """Attack 선택 시 교전 1~2회. 후공은 생존 시에만 공격."""
    if enemy_strikes_first(player, enemy):
        first, second = enemy, player
    else:
        first, second = player, enemy

    outcomes = [resolve(first, second)]
    if second.health > 0:
        outcomes.append(resolve(second, first))
    return outcomes


class Battle:
    """플레이어 vs 적 1:1 전투.

    Enemy는 이 전투가 소유하며 종료 후 폐기된다.
    """

    def __init__(
        self,
        player: "Player",
        enemy: "Enemy",
        prompt: ChoicePrompt,
        allow_flee: bool = False,
    ):
        self.player = player
        self.enemy = enemy
        self.prompt = prompt
        self.allow_flee = allow_flee
        self.log: list[BattleOutcome] = []
        self.turns = 0
        self.state = BattleState.ONGOING

    def render(self) -> str:
        """전투 화면"""
        first = (
            "(Strikes first)"
            if enemy_strikes_first(self.player, self.enemy)
            else "(Strikes second)"
        )
        lines = [
            "This is the battle screen!",
            "==========================",
            f"{self.enemy.name} is about to strike!{first}",
            f"{self.enemy.name} HP: {self.enemy.health}",
            "",
            f"HP: {self.player.health}",
            f"SP: {self.player.stamina}",
            f"MP: {self.player.mana}",
            "==========================",
        ]
        return "\n".join(lines)

    def step(self, action: BattleAction) -> BattleState:
        """선택된 행동 1턴 처리 후 상태 반환."""
        self.turns += 1
        if action is BattleAction.ATTACK:
            outcomes = attack_round(self.player, self.enemy)
            self.log.extend(outcomes)
            self.prompt.pause("\n".join(str(o) for o in outcomes))
        elif action is BattleAction.ITEM:
            self.prompt.pause(ITEM_BLOCKED_MESSAGE)
        elif self.allow_flee:
            self.prompt.pause(FLEE_SUCCESS_MESSAGE)
            self.state = BattleState.FLED
            logger.info("%s fled from %s", self.player.name, self.enemy.name)
            return self.state
        else:
            self.prompt.pause(FLEE_REFUSED_MESSAGE.format(enemy=self.enemy.name))

        self.state = check_state(self.player, self.enemy)
        return self.state

    def run(self) -> BattleState:
        """종료 상태에 도달할 때까지 반복."""
        logger.info("Battle start: %s vs %s", self.player.name, self.enemy.name)
        while True:
            self.state = check_state(self.player, self.enemy)
            if self.state is BattleState.PLAYER_DEFEATED:
                self.prompt.pause(f"{self.render()}\n{PLAYER_DEFEATED_MESSAGE}")
                break
            if self.state is BattleState.ENEMY_DEFEATED:
                self.prompt.pause(f"{self.render()}\n{ENEMY_DEFEATED_MESSAGE}")
                break

            selection = self.prompt.choose(self.render(), BATTLE_OPTIONS)
            action = BattleAction(clamp_selection(selection, len(BATTLE_OPTIONS)))
            if self.step(action) is BattleState.FLED:
                break

        logger.info(
            "Battle end: %s (turns=%d, exchanges=%d)",
            self.state.value,
            self.turns,
            len(self.log),
        )
        return self.state
