# core/settings_store.py
from __future__ import annotations
import json
import os
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ValidationError

from core.password_utils import (
    DEFAULT_LENGTH,
    CharacterClass,
    GenerationConfig,
    clamp_length,
)

DEFAULT_KEY = "keysmith.settings.v1"


class StoredSettings(BaseModel):
    """Shape of the persisted record. Unknown keys are ignored."""

    length: int = DEFAULT_LENGTH
    use_upper: bool = True
    use_lower: bool = True
    use_digits: bool = True
    use_symbols: bool = False
    easy_to_read: bool = True

    @classmethod
    def from_config(cls, config: GenerationConfig) -> "StoredSettings":
        return cls(
            length=config.length,
            use_upper=config.uses(CharacterClass.UPPER),
            use_lower=config.uses(CharacterClass.LOWER),
            use_digits=config.uses(CharacterClass.DIGIT),
            use_symbols=config.uses(CharacterClass.SYMBOL),
            easy_to_read=config.easy_to_read,
        )

    def to_config(self) -> GenerationConfig:
        cfg = GenerationConfig.from_flags(
            self.length,
            self.use_upper,
            self.use_lower,
            self.use_digits,
            self.use_symbols,
            self.easy_to_read,
        )
        return GenerationConfig(clamp_length(cfg.length, cfg), cfg.classes, cfg.easy_to_read)


class SettingsStore:
    """
    JSON key-value file; the generator settings live under `key`.
    Missing or corrupt data falls back to defaults, write errors are reported
    through the return value of save().
    """

    def __init__(self, path: str | os.PathLike, key: str = DEFAULT_KEY):
        self.path = Path(path).expanduser()
        self.key = key

    def _read_all(self) -> dict:
        if not self.path.is_file():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Unreadable settings file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Settings file {self.path} is not a JSON object, ignoring")
            return {}
        return data

    def load(self) -> GenerationConfig:
        record = self._read_all().get(self.key)
        if record is None:
            return GenerationConfig()
        try:
            return StoredSettings.model_validate(record).to_config()
        except ValidationError as e:
            logger.warning(f"Invalid settings record '{self.key}', using defaults: {e.error_count()} error(s)")
            return GenerationConfig()

    def save(self, config: GenerationConfig) -> bool:
        data = self._read_all()
        data[self.key] = StoredSettings.from_config(config).model_dump()
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
            tmp.replace(self.path)
        except OSError:
            logger.exception(f"Failed to save settings to {self.path}")
            return False
        logger.debug(f"Settings saved under '{self.key}'")
        return True
