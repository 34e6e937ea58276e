from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv, find_dotenv

_env_path = find_dotenv(".env") or ".env"
load_dotenv(_env_path, override=False)

_PACKAGE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_QUESTION_BANK = _PACKAGE_DIR / "data" / "questions.json"

_DEFAULT_ORIGINS = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


def _split_csv(raw: str) -> list[str]:
    return [o.strip().rstrip("/") for o in raw.split(",") if o.strip()]


class Settings:
    """Central configuration (env driven)."""

    def __init__(self) -> None:
        # App meta
        self.app_name: str = "PrepHub"
        self.app_version: str = os.getenv("APP_VERSION", "dev")
        self.debug: bool = _env_bool("DEBUG", "false")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        # Database
        self.database_url: str = os.getenv("DATABASE_URL", "sqlite:///./prephub.db")
        self.auto_create_tables: bool = _env_bool("AUTO_CREATE_TABLES", "true")
        self.store_max_retries: int = max(1, int(os.getenv("STORE_MAX_RETRIES", "5")))
        # CORS
        self.allow_origins: list[str] = _split_csv(os.getenv("ALLOW_ORIGINS", _DEFAULT_ORIGINS))
        # Question bank
        self.question_bank_path: Path = Path(os.getenv("QUESTION_BANK_PATH") or DEFAULT_QUESTION_BANK)
        self.quiz_sample_size: int = int(os.getenv("QUIZ_SAMPLE_SIZE", "20"))
        # Credentials (bcrypt accepts 4..31)
        self.bcrypt_rounds: int = min(31, max(4, int(os.getenv("BCRYPT_ROUNDS", "10"))))

    def get_database_url(self) -> str:
        return self.database_url


@lru_cache()
def get_settings() -> Settings:
    return Settings()
