"""Application configuration loaded from environment variables and .env file."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # 세이브 슬롯 디렉터리 (플레이어 이름당 파일 1개)
    SAVE_DIR: str = "Players"

    # Content catalog
    CATALOG_BACKEND: str = "sqlite"
    CATALOG_DATABASE_URL: str = "sqlite:///./qrpg.db"
    # 패키지 기준 경로 (실행 위치와 무관)
    CATALOG_SEED_PATH: str = str(Path(__file__).parent / "data" / "seed_catalog.json")

    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"

    # 캐릭터 생성
    STARTING_MONEY: int = 100
    CREATION_POINTS: int = 5

    RNG_SEED: Optional[int] = None
    CLEAR_SCREEN: bool = True


settings = Settings()
