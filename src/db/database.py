"""Catalog database engine and session configuration.

The session is owned by SqlCatalog and released through
ContentCatalog.close() at shutdown.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.config import settings

engine = create_engine(
    settings.CATALOG_DATABASE_URL,
    connect_args={"check_same_thread": False},  # required for SQLite
    echo=settings.DEBUG,
)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
