"""In-memory content catalog for testing and offline play."""

import json
import random
from pathlib import Path
from typing import Iterable, Optional

from src.core.enemy import Enemy
from src.core.item.models import Weapon, make_weapon
from src.services.catalog.base import CatalogEmptyError, ContentCatalog


class InMemoryCatalog(ContentCatalog):
    """Catalog backed by plain lists.

    Used for tests and as a fallback when no database is configured.
    """

    def __init__(
        self,
        enemy_names: Iterable[str] = (),
        weapons: Iterable[Weapon] = (),
        rng: Optional[random.Random] = None,
    ):
        self._enemy_names = list(enemy_names)
        self._weapons = list(weapons)
        self._rng = rng or random.Random()

    @classmethod
    def from_json(
        cls, path: str | Path, rng: Optional[random.Random] = None
    ) -> "InMemoryCatalog":
        """Build from the same seed file SqlCatalog.seed_from_json reads."""
        with Path(path).open("r", encoding="utf-8") as f:
            raw: dict = json.load(f)
        weapons = [
            make_weapon(
                w["name"],
                w["weight"],
                w["value"],
                w.get("physique_scale", 0.0),
                w.get("technique_scale", 0.0),
                w.get("mystique_scale", 0.0),
            )
            for w in raw.get("weapons", [])
        ]
        return cls(raw.get("enemies", []), weapons, rng=rng)

    @property
    def name(self) -> str:
        """Return the catalog backend name."""
        return "memory"

    def list_enemies(self) -> list[Enemy]:
        return [Enemy(name) for name in self._enemy_names]

    def list_weapons(self) -> list[Weapon]:
        return list(self._weapons)

    def pick_random_enemy(self) -> Enemy:
        if not self._enemy_names:
            raise CatalogEmptyError("In-memory catalog has no enemies")
        return Enemy(self._rng.choice(self._enemy_names))
