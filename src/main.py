"""Console entrypoint."""

import random
import sys

from src.cli.menu import main_menu
from src.cli.prompt import ConsolePrompt
from src.config import settings
from src.core.logging import get_logger, setup_logging
from src.services.catalog import CatalogEmptyError, get_catalog
from src.services.game_service import GameService
from src.services.save_service import SaveError, SaveService

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


def build_service() -> GameService:
    """카탈로그/세이브/프롬프트 조립 후 세션 준비."""
    rng = random.Random(settings.RNG_SEED)
    catalog = get_catalog(rng=rng)
    service = GameService(
        catalog=catalog,
        saves=SaveService(settings.SAVE_DIR),
        prompt=ConsolePrompt(clear_screen=settings.CLEAR_SCREEN),
        starting_money=settings.STARTING_MONEY,
        rng=rng,
    )
    try:
        service.start()
    except Exception:
        service.close()
        raise
    return service


def main() -> int:
    try:
        service = build_service()
    except (CatalogEmptyError, SaveError, OSError) as e:
        # 시드 파일 누락도 OSError로 여기서 보고
        logger.error("Startup failed: %s", e)
        print(f"Cannot start: {e}", file=sys.stderr)
        return 1

    try:
        main_menu(service, creation_points=settings.CREATION_POINTS)
    except (KeyboardInterrupt, EOFError):
        print("\nBye!")
    finally:
        service.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
