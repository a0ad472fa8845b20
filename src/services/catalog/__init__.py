"""Content catalog module."""

from src.services.catalog.base import CatalogEmptyError, ContentCatalog
from src.services.catalog.factory import get_catalog
from src.services.catalog.memory import InMemoryCatalog
from src.services.catalog.sql import SqlCatalog

__all__ = [
    "CatalogEmptyError",
    "ContentCatalog",
    "InMemoryCatalog",
    "SqlCatalog",
    "get_catalog",
]
