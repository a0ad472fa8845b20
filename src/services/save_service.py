"""세이브 Service — Player ↔ 세이브 슬롯(JSON 텍스트 파일)

슬롯 = <save_dir>/<플레이어 이름>.txt
같은 이름으로 다시 저장하면 덮어쓴다 (버전 관리/백업 없음).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from src.core.item.models import InventoryEntry, Item, Weapon
from src.core.logging import get_logger
from src.core.player import Player
from src.core.stats import Stats
from src.db.schemas import (
    InventoryEntryRecord,
    ItemRecord,
    PlayerRecord,
    StatsRecord,
    WeaponRecord,
)

logger = get_logger(__name__)

SLOT_SUFFIX = ".txt"


class SaveError(Exception):
    """세이브/로드 실패 공통"""


class SaveIOError(SaveError):
    """슬롯 읽기/쓰기 불가"""


class SaveDecodeError(SaveError):
    """손상되었거나 호환되지 않는 세이브 데이터"""


# === Core ↔ Record 변환 ===


def _item_to_record(item: Item) -> ItemRecord:
    return ItemRecord(name=item.name, weight=item.weight, value=item.value)


def _weapon_to_record(weapon: Weapon) -> WeaponRecord:
    return WeaponRecord(
        item=_item_to_record(weapon.item),
        physique_scale=weapon.physique_scale,
        technique_scale=weapon.technique_scale,
        mystique_scale=weapon.mystique_scale,
    )


def _entry_to_record(entry: InventoryEntry) -> InventoryEntryRecord:
    if isinstance(entry, Weapon):
        return InventoryEntryRecord(Weapon=_weapon_to_record(entry))
    return InventoryEntryRecord(Item=_item_to_record(entry))


def _record_to_weapon(record: WeaponRecord) -> Weapon:
    return Weapon(
        item=Item(
            name=record.item.name,
            weight=record.item.weight,
            value=record.item.value,
        ),
        physique_scale=record.physique_scale,
        technique_scale=record.technique_scale,
        mystique_scale=record.mystique_scale,
    )


def _record_to_entry(record: InventoryEntryRecord) -> InventoryEntry:
    if record.Weapon is not None:
        return _record_to_weapon(record.Weapon)
    return Item(name=record.Item.name, weight=record.Item.weight, value=record.Item.value)


def player_to_record(player: Player) -> PlayerRecord:
    """Player를 PlayerRecord로 변환"""
    return PlayerRecord(
        name=player.name,
        location=player.location,
        quest=player.quest,
        stats=StatsRecord(
            physique=player.stats.physique,
            technique=player.stats.technique,
            mystique=player.stats.mystique,
        ),
        health=player.health,
        stamina=player.stamina,
        mana=player.mana,
        money=player.money,
        inventory=[_entry_to_record(e) for e in player.inventory],
        equipped=_weapon_to_record(player.equipped) if player.equipped else None,
        triggers=dict(player.triggers),
    )


def record_to_player(record: PlayerRecord) -> Player:
    """PlayerRecord를 Player로 변환"""
    return Player(
        name=record.name,
        location=record.location,
        quest=record.quest,
        stats=Stats(
            physique=record.stats.physique,
            technique=record.stats.technique,
            mystique=record.stats.mystique,
        ),
        health=record.health,
        stamina=record.stamina,
        mana=record.mana,
        money=record.money,
        inventory=[_record_to_entry(r) for r in record.inventory],
        equipped=_record_to_weapon(record.equipped) if record.equipped else None,
        triggers=dict(record.triggers),
    )


class SaveService:
    """플레이어 세이브 슬롯 관리"""

    def __init__(self, save_dir: str | Path):
        self._root = Path(save_dir)

    @property
    def root(self) -> Path:
        return self._root

    def ensure_storage_root(self) -> None:
        """저장 디렉터리 생성. 이미 있으면 아무것도 하지 않음.

        프로세스 시작 시 save/load 이전에 1회 호출.
        """
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SaveIOError(f"Cannot create save directory {self._root}: {e}") from e

    def slot_path(self, slot_name: str) -> Path:
        """슬롯 이름 → 파일 경로. '.txt' 접미사는 있어도 없어도 됨."""
        name = slot_name.strip()
        if name.endswith(SLOT_SUFFIX):
            name = name[: -len(SLOT_SUFFIX)]
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise SaveIOError(f"Invalid save slot name: {slot_name!r}")
        return self._root / f"{name}{SLOT_SUFFIX}"

    def exists(self, slot_name: str) -> bool:
        try:
            return self.slot_path(slot_name).is_file()
        except SaveIOError:
            return False

    def list_slots(self) -> list[str]:
        """저장된 슬롯 이름 목록 (정렬)."""
        if not self._root.is_dir():
            return []
        return sorted(p.stem for p in self._root.glob(f"*{SLOT_SUFFIX}"))

    def save(self, player: Player) -> Path:
        """플레이어 상태 저장. 같은 이름의 슬롯은 덮어쓴다."""
        path = self.slot_path(player.name)
        payload = player_to_record(player).model_dump_json()
        try:
            with path.open("w", encoding="utf-8") as f:
                f.write(payload)
        except OSError as e:
            logger.warning("Save failed for %s: %s", player.name, e)
            raise SaveIOError(f"Cannot write save slot {path}: {e}") from e

        logger.info("Saved player %s to %s", player.name, path)
        return path

    def load(self, slot_name: str) -> Player:
        """슬롯에서 플레이어 복원."""
        path = self.slot_path(slot_name)
        try:
            with path.open("r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            logger.warning("Load failed for %s: %s", slot_name, e)
            raise SaveIOError(f"Cannot read save slot {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise SaveDecodeError(f"Save slot {path} is not valid UTF-8 text") from e

        try:
            record = PlayerRecord.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Corrupt save slot %s: %s", path, e)
            raise SaveDecodeError(f"Corrupt save slot {path}") from e

        logger.info("Loaded player %s from %s", record.name, path)
        return record_to_player(record)
