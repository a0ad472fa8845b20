"""GameService 테스트: 생성/저장/로드, 인트로 스토리, 조우"""

import random

import pytest

from src.cli.prompt import ScriptedPrompt
from src.core.combat.battle import BattleState
from src.core.player import Player
from src.core.stats import Stats
from src.services.catalog import CatalogEmptyError, InMemoryCatalog
from src.services.game_service import (
    CORRUPT_SAVE_MESSAGE,
    INTRO_LINES,
    INTRO_TRIGGER,
    LOAD_FAILED_MESSAGE,
    SAVE_FAILED_MESSAGE,
    TOO_WOUNDED_MESSAGE,
    GameService,
)
from src.services.save_service import SaveService


def _service(catalog, saves, prompt) -> GameService:
    return GameService(catalog, saves, prompt, rng=random.Random(11))


class TestSession:
    def test_start_validates_catalog(self, saves: SaveService):
        service = _service(InMemoryCatalog(), saves, ScriptedPrompt())
        with pytest.raises(CatalogEmptyError):
            service.start()

    def test_start_creates_save_dir(self, tmp_path, catalog):
        saves = SaveService(tmp_path / "fresh")
        _service(catalog, saves, ScriptedPrompt()).start()
        assert (tmp_path / "fresh").is_dir()

    def test_new_player_uses_starting_money(self, catalog, saves):
        service = GameService(catalog, saves, ScriptedPrompt(), starting_money=250)
        player = service.new_player("Rich", Stats(1, 1, 1))
        assert player.money == 250
        assert service.player is player


class TestSaveLoad:
    def test_save_then_load(self, catalog, saves, player: Player):
        service = _service(catalog, saves, ScriptedPrompt())
        assert service.save_player(player).success
        result = service.load_player("Quincy")
        assert result.success
        assert result.player == player
        assert service.player == player

    def test_missing_slot_message(self, catalog, saves):
        result = _service(catalog, saves, ScriptedPrompt()).load_player("Nobody")
        assert not result.success
        assert result.message == LOAD_FAILED_MESSAGE

    def test_corrupt_slot_message(self, catalog, saves):
        (saves.root / "Bad.txt").write_text("{", encoding="utf-8")
        result = _service(catalog, saves, ScriptedPrompt()).load_player("Bad")
        assert not result.success
        assert result.message == CORRUPT_SAVE_MESSAGE

    def test_save_failure_is_reported(self, tmp_path, catalog, player: Player):
        saves = SaveService(tmp_path / "never-created")
        result = _service(catalog, saves, ScriptedPrompt()).save_player(player)
        assert not result.success
        assert result.message == SAVE_FAILED_MESSAGE


class TestStory:
    def test_intro_runs_once(self, catalog, saves):
        player = Player.create("Quincy", Stats(10, 1, 1))
        prompt = ScriptedPrompt([0, 0, 0, 0])
        service = _service(catalog, saves, prompt)

        player = service.run_story(player)

        assert player.triggers == {INTRO_TRIGGER: True}
        # 체력 절반에서 시작: 57 // 2 = 28, Rabbit 선공 4회 x 1
        assert player.health == 24
        assert prompt.messages[: len(INTRO_LINES)] == list(INTRO_LINES)
        assert saves.load("Quincy") == player

        # 트리거가 있으면 다시 실행하지 않음
        assert service.run_story(player) is player
        assert prompt.remaining == 0

    def test_intro_save_failure_does_not_raise(self, tmp_path, catalog):
        player = Player.create("Quincy", Stats(10, 1, 1))
        prompt = ScriptedPrompt([0, 0, 0, 0])
        service = _service(catalog, SaveService(tmp_path / "missing"), prompt)

        service.char_intro(player)

        assert player.triggers[INTRO_TRIGGER] is True
        assert prompt.messages[-1] == SAVE_FAILED_MESSAGE


class TestEncounter:
    def test_random_encounter_scales_from_player(self, catalog, saves):
        player = Player.create("Quincy", Stats(3, 3, 3))
        enemy = _service(catalog, saves, ScriptedPrompt()).random_encounter(player)
        assert enemy.name in ("Rabbit", "Goblin")
        for value in (enemy.stats.physique, enemy.stats.technique, enemy.stats.mystique):
            assert 2 <= value <= 4
        assert enemy.health == enemy.stats.max_health()

    def test_hunt_can_flee(self, catalog, saves, player: Player):
        prompt = ScriptedPrompt([2])
        assert _service(catalog, saves, prompt).hunt(player) is BattleState.FLED

    def test_hunt_refused_when_defeated(self, catalog, saves, player: Player):
        player.health = 0
        prompt = ScriptedPrompt()
        assert _service(catalog, saves, prompt).hunt(player) is None
        assert prompt.messages == [TOO_WOUNDED_MESSAGE]
