"""Shared test fixtures."""

import random

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.cli.prompt import ScriptedPrompt
from src.core.enemy import Enemy
from src.core.item.models import Item, Weapon, make_weapon
from src.core.player import Player
from src.core.stats import Stats
from src.db.models import Base
from src.services.catalog.memory import InMemoryCatalog
from src.services.save_service import SaveService

TEST_ENGINE = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
)
TestSession = sessionmaker(bind=TEST_ENGINE, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session() -> Session:
    """Catalog session on a fresh in-memory SQLite database."""
    Base.metadata.drop_all(bind=TEST_ENGINE)
    Base.metadata.create_all(bind=TEST_ENGINE)
    session = TestSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def longsword() -> Weapon:
    return make_weapon("Longsword", 6, 150, 1.6, 0.8, 0.0)


@pytest.fixture()
def dagger() -> Weapon:
    return make_weapon("Dagger", 1, 40, 0.5, 1.5, 0.0)


@pytest.fixture()
def torch() -> Item:
    return Item(name="Torch", weight=0.5, value=5)


@pytest.fixture()
def player() -> Player:
    """Fresh (1, 1, 1) character."""
    return Player.create("Quincy", Stats(1, 1, 1))


@pytest.fixture()
def rabbit() -> Enemy:
    return Enemy("Rabbit").with_stats(1, 1, 1)


@pytest.fixture()
def catalog(longsword: Weapon, dagger: Weapon) -> InMemoryCatalog:
    return InMemoryCatalog(
        enemy_names=["Rabbit", "Goblin"],
        weapons=[dagger, longsword],
        rng=random.Random(7),
    )


@pytest.fixture()
def saves(tmp_path) -> SaveService:
    service = SaveService(tmp_path / "Players")
    service.ensure_storage_root()
    return service


@pytest.fixture()
def make_prompt():
    """ScriptedPrompt factory: make_prompt(0, 1, "name", -1)"""

    def _make(*answers) -> ScriptedPrompt:
        return ScriptedPrompt(answers)

    return _make
