"""게임 세션 Service — 플레이어 생성/저장/로드, 스토리, 조우

Service → Core, Service → Service(save, catalog) 주입만 허용.
저장 실패는 여기서 잡아서 ActionResult 메시지로 변환한다 (세션은 계속).
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from src.core.choice import ChoicePrompt
from src.core.combat.battle import Battle, BattleState
from src.core.enemy import Enemy
from src.core.logging import get_logger
from src.core.player import DEFAULT_MONEY, Player
from src.core.stats import Stats
from src.services.catalog.base import ContentCatalog
from src.services.save_service import SaveDecodeError, SaveError, SaveService

logger = get_logger(__name__)

INTRO_TRIGGER = "char_intro"
INTRO_ENEMY_NAME = "Rabbit"

INTRO_LINES: tuple[str, ...] = (
    "Ahoy there, traveler! Would ye be interested in helpn' dis ol' merchant with a task?",
    "The task be simple, ya! You help me travel to the next city over yonder. (Points eastwards)",
    "Then i'll pay yee when we get to the city, ya?",
    "Alright! Sounds great. Let's get going'",
    "Hours later after traveling for the rest of the day. You wake up with masked shadow figures over your tent!",
    "They attack you visciously, knock you out, and take all your belongings.",
    "You feel a massive splash of water as you go in and out of conciousness.",
    "You wake up hours later..With no food and water..",
    "Those bastards took all of your equipment, you need to head to the nearest town to fully recover..",
    "As you fumble around along a dirt path back to any nearby civilization..you hear rustling in the bushes from the forst!",
    "You get ready for anythin!",
    "Out of the bushes come a tiny, but a rabid and agitated animal ready to strike!",
    "You must fight it off or die! Even if you only have half of your strength left..",
)

SAVE_FAILED_MESSAGE = "Failed to save character."
LOAD_FAILED_MESSAGE = "Can't load that character..."
CORRUPT_SAVE_MESSAGE = "Failed to load character."
TOO_WOUNDED_MESSAGE = "You are too wounded to go hunting."


@dataclass
class ActionResult:
    """행동 결과"""

    success: bool
    action_type: str
    message: str
    player: Optional[Player] = None


class GameService:
    """단일 플레이어 세션.

    활성 Player는 이 세션이 독점 소유한다.
    """

    def __init__(
        self,
        catalog: ContentCatalog,
        saves: SaveService,
        prompt: ChoicePrompt,
        starting_money: int = DEFAULT_MONEY,
        rng: Optional[random.Random] = None,
    ):
        self._catalog = catalog
        self._saves = saves
        self._prompt = prompt
        self._starting_money = starting_money
        self._rng = rng or random.Random()
        self.player: Optional[Player] = None

    @property
    def catalog(self) -> ContentCatalog:
        return self._catalog

    @property
    def prompt(self) -> ChoicePrompt:
        return self._prompt

    def start(self) -> None:
        """프로세스 시작 시 1회: 카탈로그 검증 + 저장소 준비."""
        self._catalog.validate()
        self._saves.ensure_storage_root()
        logger.info("Session ready (catalog=%s, saves=%s)", self._catalog.name, self._saves.root)

    def close(self) -> None:
        """프로세스 종료 시 1회: 카탈로그 세션 반환."""
        self._catalog.close()
        logger.info("Session closed")

    # === 플레이어 관리 ===

    def new_player(self, name: str, stats: Stats) -> Player:
        self.player = Player.create(name, stats, money=self._starting_money)
        logger.info("Character created: %s (%s)", name, stats)
        return self.player

    def save_player(self, player: Player) -> ActionResult:
        try:
            path = self._saves.save(player)
        except SaveError as e:
            logger.warning("Save failed: %s", e)
            return ActionResult(False, "save", SAVE_FAILED_MESSAGE, player)
        return ActionResult(True, "save", f"Saved to {path}", player)

    def load_player(self, slot_name: str) -> ActionResult:
        try:
            player = self._saves.load(slot_name)
        except SaveDecodeError as e:
            logger.warning("Load failed (decode): %s", e)
            return ActionResult(False, "load", CORRUPT_SAVE_MESSAGE)
        except SaveError as e:
            logger.warning("Load failed: %s", e)
            return ActionResult(False, "load", LOAD_FAILED_MESSAGE)
        self.player = player
        return ActionResult(True, "load", f"Loaded {player.name}", player)

    def list_slots(self) -> list[str]:
        return self._saves.list_slots()

    # === 스토리 ===

    def run_story(self, player: Player) -> Player:
        """트리거가 하나도 없으면 캐릭터 인트로부터 시작."""
        if not player.triggers:
            player = self.char_intro(player)
        return player

    def char_intro(self, player: Player) -> Player:
        """인트로: 강제 전투 (도주 불가) 후 트리거 기록 + 저장."""
        for line in INTRO_LINES:
            self._prompt.pause(line)

        player.health = player.stats.max_health() // 2
        bunny = Enemy(INTRO_ENEMY_NAME).with_stats(1, 1, 1)
        state = Battle(player, bunny, self._prompt).run()
        self._prompt.pause(str(bunny))
        logger.info("Intro battle finished: %s", state.value)

        player.triggers[INTRO_TRIGGER] = True
        result = self.save_player(player)
        if not result.success:
            self._prompt.pause(result.message)
        return player

    # === 조우 ===

    def random_encounter(self, player: Player) -> Enemy:
        """카탈로그에서 무작위 적 + 플레이어 스탯 기준 ±1 스케일."""
        template = self._catalog.pick_random_enemy()
        stats = player.stats
        return template.with_stats(
            max(0, stats.physique + self._rng.randint(-1, 1)),
            max(0, stats.technique + self._rng.randint(-1, 1)),
            max(0, stats.mystique + self._rng.randint(-1, 1)),
        )

    def hunt(self, player: Player) -> Optional[BattleState]:
        """일반 조우 (도주 가능). 체력 1 미만이면 시작하지 않음."""
        if player.is_defeated():
            self._prompt.pause(TOO_WOUNDED_MESSAGE)
            return None
        enemy = self.random_encounter(player)
        return Battle(player, enemy, self._prompt, allow_flee=True).run()
