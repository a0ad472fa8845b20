"""Abstract base class for content catalogs."""

from abc import ABC, abstractmethod

from src.core.enemy import Enemy
from src.core.item.models import Weapon


class CatalogEmptyError(RuntimeError):
    """Catalog has no data the game needs to start (startup configuration fault)."""


class ContentCatalog(ABC):
    """Read-only source of enemy templates and purchasable weapons.

    Implementations are passed explicitly into the services that need
    them; nothing opens the catalog implicitly.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the catalog backend name."""
        ...

    @abstractmethod
    def list_enemies(self) -> list[Enemy]:
        """Return enemy templates (stats zeroed, health 100)."""
        ...

    @abstractmethod
    def list_weapons(self) -> list[Weapon]:
        """Return purchasable weapons in catalog order."""
        ...

    @abstractmethod
    def pick_random_enemy(self) -> Enemy:
        """Return one enemy template chosen at random.

        Raises:
            CatalogEmptyError: if no enemies are defined.
        """
        ...

    def validate(self) -> None:
        """Fail fast when the catalog cannot supply an encounter."""
        if not self.list_enemies():
            raise CatalogEmptyError(
                f"Content catalog '{self.name}' defines no enemies; "
                "seed the catalog before starting the game"
            )

    def close(self) -> None:
        """Release backend resources. Called once at shutdown."""
