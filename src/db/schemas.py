"""Save-slot record schemas.

JSON layout matches the original save files:
inventory entries are externally tagged (``{"Item": {...}}`` /
``{"Weapon": {...}}``) and weapons nest their item.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_serializer, model_validator


class StatsRecord(BaseModel):
    """스탯"""

    physique: int = Field(..., ge=0)
    technique: int = Field(..., ge=0)
    mystique: int = Field(..., ge=0)


class ItemRecord(BaseModel):
    """일반 아이템"""

    name: str
    weight: float
    value: int


class WeaponRecord(BaseModel):
    """무기 (item + 스케일)"""

    item: ItemRecord
    physique_scale: float
    technique_scale: float
    mystique_scale: float


class InventoryEntryRecord(BaseModel):
    """인벤토리 항목. Item / Weapon 중 정확히 하나."""

    Item: Optional[ItemRecord] = None
    Weapon: Optional[WeaponRecord] = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "InventoryEntryRecord":
        if (self.Item is None) == (self.Weapon is None):
            raise ValueError("inventory entry must be exactly one of Item/Weapon")
        return self

    @model_serializer(mode="wrap")
    def _tagged(self, handler):
        # 설정된 쪽만 출력: {"Weapon": {...}}
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}


class PlayerRecord(BaseModel):
    """세이브 슬롯 1개 = 플레이어 1명"""

    name: str = Field(..., min_length=1)
    location: str
    quest: str
    stats: StatsRecord
    health: int
    stamina: int
    mana: int
    money: int
    inventory: list[InventoryEntryRecord] = Field(default_factory=list)
    equipped: Optional[WeaponRecord] = None
    triggers: dict[str, bool] = Field(default_factory=dict)
