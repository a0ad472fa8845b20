"""Factory for creating content catalog instances."""

import random
from typing import Optional

from src.config import settings
from src.core.logging import get_logger
from src.db.database import SessionLocal, engine
from src.db.models import Base
from src.services.catalog.base import ContentCatalog
from src.services.catalog.memory import InMemoryCatalog
from src.services.catalog.sql import SqlCatalog

logger = get_logger(__name__)


def get_catalog(
    backend: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> ContentCatalog:
    """Get a content catalog instance.

    Args:
        backend: Optional backend name. If not specified,
                 uses CATALOG_BACKEND from config.
        rng: Random source for random encounters.

    Returns:
        A ContentCatalog instance.
    """
    name = backend or settings.CATALOG_BACKEND

    if name == "sqlite":
        logger.debug("Using SqlCatalog at %s", settings.CATALOG_DATABASE_URL)
        Base.metadata.create_all(bind=engine)
        catalog = SqlCatalog(SessionLocal(), rng=rng)
        catalog.seed_from_json(settings.CATALOG_SEED_PATH)
        return catalog

    if name != "memory":
        logger.warning("Unknown catalog backend '%s', falling back to memory", name)
    logger.debug("Using InMemoryCatalog from %s", settings.CATALOG_SEED_PATH)
    return InMemoryCatalog.from_json(settings.CATALOG_SEED_PATH, rng=rng)
