"""Console entrypoint: startup failures and catalog lifecycle."""

import pytest

import src.main as entry
from src.config import settings
from src.services.catalog.memory import InMemoryCatalog


class _TrackingCatalog(InMemoryCatalog):
    closed = False

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def isolated_settings(monkeypatch, tmp_path):
    """Saves under tmp_path, memory catalog, no screen clearing."""
    monkeypatch.setattr(settings, "SAVE_DIR", str(tmp_path / "Players"))
    monkeypatch.setattr(settings, "CATALOG_BACKEND", "memory")
    monkeypatch.setattr(settings, "CLEAR_SCREEN", False)
    return tmp_path


class TestStartupFailures:
    def test_empty_catalog(self, monkeypatch, capsys, isolated_settings):
        catalog = _TrackingCatalog()
        monkeypatch.setattr(entry, "get_catalog", lambda rng=None: catalog)

        assert entry.main() == 1
        assert "Cannot start" in capsys.readouterr().err
        assert catalog.closed

    def test_save_root_unusable(self, monkeypatch, capsys, isolated_settings):
        blocker = isolated_settings / "Players"
        blocker.write_text("not a directory", encoding="utf-8")
        catalog = _TrackingCatalog(enemy_names=["Rabbit"])
        monkeypatch.setattr(entry, "get_catalog", lambda rng=None: catalog)

        assert entry.main() == 1
        assert "Cannot start" in capsys.readouterr().err
        assert catalog.closed

    def test_missing_seed_file(self, monkeypatch, capsys, isolated_settings):
        monkeypatch.setattr(
            settings, "CATALOG_SEED_PATH", str(isolated_settings / "missing.json")
        )

        assert entry.main() == 1
        assert "Cannot start" in capsys.readouterr().err


class TestSessionLifecycle:
    def test_catalog_closed_after_menu(self, monkeypatch, isolated_settings):
        catalog = _TrackingCatalog(enemy_names=["Rabbit"])
        seen = []
        monkeypatch.setattr(entry, "get_catalog", lambda rng=None: catalog)
        monkeypatch.setattr(
            entry,
            "main_menu",
            lambda service, creation_points: seen.append(catalog.closed),
        )

        assert entry.main() == 0
        assert seen == [False]
        assert catalog.closed

    def test_catalog_closed_on_interrupt(self, monkeypatch, capsys, isolated_settings):
        catalog = _TrackingCatalog(enemy_names=["Rabbit"])

        def interrupted(service, creation_points):
            raise KeyboardInterrupt

        monkeypatch.setattr(entry, "get_catalog", lambda rng=None: catalog)
        monkeypatch.setattr(entry, "main_menu", interrupted)

        assert entry.main() == 0
        assert "Bye!" in capsys.readouterr().out
        assert catalog.closed

    def test_default_seed_found_outside_repo_root(self, monkeypatch, isolated_settings):
        monkeypatch.chdir(isolated_settings)

        service = entry.build_service()
        try:
            assert service.catalog.list_weapons()
            assert (isolated_settings / "Players").is_dir()
        finally:
            service.close()
