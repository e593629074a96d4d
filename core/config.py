# core/config.py
from __future__ import annotations
import sys
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Optional

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.history import HISTORY_SIZE


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="KEYSMITH_")

    settings_path: Path = Path.home() / ".keysmith" / "settings.json"
    settings_key: str = "keysmith.settings.v1"
    history_size: int = HISTORY_SIZE
    log_level: str = "INFO"
    log_file_path: Optional[Path] = None


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()


_configured = False


def configure_logging(settings: AppSettings | None = None, *, force: bool = False) -> None:
    """
    Replace loguru's default sink with stderr (+ optional rotating file).
    Streamlit reruns the script on every interaction, so this only runs once
    unless `force` is set.
    """
    global _configured
    if _configured and not force:
        return
    cfg = settings or get_settings()

    logger.remove()
    logger.add(
        sys.stderr,
        level=cfg.log_level,
        backtrace=True,
        diagnose=False,
    )

    if cfg.log_file_path:
        cfg.log_file_path.parent.mkdir(exist_ok=True, parents=True)
        logger.add(
            cfg.log_file_path.resolve(),
            rotation="10 MB",
            retention=timedelta(days=7),
            backtrace=True,
            diagnose=False,
            level=cfg.log_level,
        )

    _configured = True
    logger.debug(f"Logging configured at {cfg.log_level}")
