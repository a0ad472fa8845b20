"""Content catalog Service — enemies/weapons 테이블 ↔ Core 변환

시작 시 seed_catalog.json을 DB에 동기화하고,
이후에는 읽기 전용으로 사용한다.
"""

from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.enemy import Enemy
from src.core.item.models import Weapon, make_weapon
from src.core.logging import get_logger
from src.db.models import EnemyModel, WeaponModel
from src.services.catalog.base import CatalogEmptyError, ContentCatalog

logger = get_logger(__name__)


def _weapon_to_core(orm: WeaponModel) -> Weapon:
    return make_weapon(
        orm.name,
        orm.weight,
        orm.value,
        orm.physique_scale,
        orm.technique_scale,
        orm.mystique_scale,
    )


class SqlCatalog(ContentCatalog):
    """SQLAlchemy 세션 기반 카탈로그"""

    def __init__(self, db: Session, rng: Optional[random.Random] = None):
        self._db = db
        self._rng = rng or random.Random()

    @property
    def name(self) -> str:
        return "sqlite"

    # === 조회 ===

    def list_enemies(self) -> list[Enemy]:
        rows = self._db.scalars(select(EnemyModel).order_by(EnemyModel.name)).all()
        return [Enemy(row.name) for row in rows]

    def list_weapons(self) -> list[Weapon]:
        rows = self._db.scalars(select(WeaponModel).order_by(WeaponModel.value)).all()
        return [_weapon_to_core(row) for row in rows]

    def pick_random_enemy(self) -> Enemy:
        enemies = self.list_enemies()
        if not enemies:
            raise CatalogEmptyError("Catalog database has no enemies")
        return self._rng.choice(enemies)

    def close(self) -> None:
        self._db.close()
        logger.debug("Catalog session closed")

    # === 시드 ===

    def seed_from_json(self, path: str | Path) -> int:
        """seed_catalog.json 로드 후 없는 행만 추가. 반환: 추가된 수량.

        형식: {"enemies": ["Rabbit", ...], "weapons": [{name, weight, value,
        physique_scale, technique_scale, mystique_scale}, ...]}
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            raw: dict = json.load(f)

        count = 0
        for enemy_name in raw.get("enemies", []):
            if self._db.get(EnemyModel, enemy_name) is None:
                self._db.add(EnemyModel(name=enemy_name))
                count += 1

        for entry in raw.get("weapons", []):
            try:
                if self._db.get(WeaponModel, entry["name"]) is not None:
                    continue
                self._db.add(
                    WeaponModel(
                        name=entry["name"],
                        weight=int(entry["weight"]),
                        value=int(entry["value"]),
                        physique_scale=float(entry.get("physique_scale", 0.0)),
                        technique_scale=float(entry.get("technique_scale", 0.0)),
                        mystique_scale=float(entry.get("mystique_scale", 0.0)),
                    )
                )
                count += 1
            except (KeyError, ValueError) as e:
                logger.warning(
                    "Failed to load weapon: %s — %s", entry.get("name", "?"), e
                )

        self._db.commit()
        logger.info("Seeded %d catalog rows from %s", count, path)
        return count
