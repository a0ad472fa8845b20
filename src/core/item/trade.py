"""거래 시스템 — 상점 구매/판매 판정

구매: money >= value 일 때만 성공, 무기 사본을 인벤토리 끝에 추가
판매: 무기만 가능, value 전액 환급 후 해당 항목 제거
실패 시 상태 변경 없음.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .models import InventoryEntry, Weapon

if TYPE_CHECKING:
    from src.core.player import Player

logger = logging.getLogger(__name__)

PURCHASE_MESSAGE = "That shall serve you well!"
INSUFFICIENT_FUNDS_MESSAGE = "You idiot! You can't afford that, ye swindler!"
NOT_SELLABLE_MESSAGE = "I've no use for that, ye can only sell me weapons!"
SOLD_MESSAGE = "Pleasure doin' business with ye!"


@dataclass
class TradeResult:
    """거래 결과"""

    success: bool
    message: str
    money: int  # 거래 후 소지금
    entry: Optional[InventoryEntry] = None


def can_afford(money: int, price: int) -> bool:
    return money >= price


def buy(player: "Player", weapon: Weapon) -> TradeResult:
    """카탈로그 무기 구매."""
    if not can_afford(player.money, weapon.value):
        logger.info(
            "Purchase rejected: %s has $%d, %s costs $%d",
            player.name,
            player.money,
            weapon.name,
            weapon.value,
        )
        return TradeResult(False, INSUFFICIENT_FUNDS_MESSAGE, player.money)

    player.money -= weapon.value
    # Weapon은 frozen이므로 동일 객체 공유로 충분
    player.inventory.append(weapon)
    logger.info("%s bought %s for $%d", player.name, weapon.name, weapon.value)
    return TradeResult(True, PURCHASE_MESSAGE, player.money, weapon)


def sell(player: "Player", index: int) -> TradeResult:
    """인벤토리 index 항목 판매. 무기가 아니면 거절.

    범위 밖 index는 IndexError.
    """
    entry = player.inventory[index]
    if not isinstance(entry, Weapon):
        return TradeResult(False, NOT_SELLABLE_MESSAGE, player.money, entry)

    player.money += entry.value
    player.inventory.pop(index)
    logger.info("%s sold %s for $%d", player.name, entry.name, entry.value)
    return TradeResult(True, SOLD_MESSAGE, player.money, entry)
