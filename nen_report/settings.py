from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

ROOT_DIR = Path(__file__).resolve().parents[1]


def _default_db_url() -> str:
    db_path = ROOT_DIR / "data" / "submissions.db"
    return f"sqlite:///{db_path}"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    db_url: str = Field(default_factory=_default_db_url)
    reports_dir: Optional[Path] = None
    report_config_path: Optional[Path] = None
    strict_scores: bool = False
    log_level: str = "INFO"


def settings_from_env() -> dict:
    reports_dir = os.getenv("NEN_REPORTS_DIR")
    config_path = os.getenv("NEN_REPORT_CONFIG")
    return dict(
        db_url=os.getenv("NEN_DB_URL", _default_db_url()),
        reports_dir=Path(reports_dir) if reports_dir else None,
        report_config_path=Path(config_path) if config_path else None,
        strict_scores=_env_flag("NEN_STRICT_SCORES"),
        log_level=os.getenv("NEN_LOG_LEVEL", "INFO"),
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings(**settings_from_env())
