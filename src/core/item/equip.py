"""장비 교체 상태 머신"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .models import Weapon

if TYPE_CHECKING:
    from src.core.player import Player

logger = logging.getLogger(__name__)


def equip_swap(player: "Player", index: int) -> Weapon:
    """인벤토리 index의 무기를 장착하고 기존 장비를 인벤토리로 이동.

    - 장착 무기의 스케일은 1.0/1.0/1.0으로 재설정 (원래 스케일 소실)
    - 기존 장비는 인벤토리 끝에 추가 → 길이 불변
    - 무기가 아니면 ValueError, 범위 밖이면 IndexError (상태 변경 없음)
    """
    entry = player.inventory[index]
    if not isinstance(entry, Weapon):
        raise ValueError(f"Inventory entry {index} ({entry.name}) is not a weapon")

    player.inventory.pop(index)
    weapon = entry.normalized()

    previous = player.equipped
    player.equipped = None
    if previous is not None:
        player.inventory.append(previous)
    player.equipped = weapon

    logger.info(
        "%s equipped %s (was %s)",
        player.name,
        weapon.name,
        previous.name if previous else None,
    )
    return weapon
