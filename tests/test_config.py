from pathlib import Path

from loguru import logger

from core.config import AppSettings, configure_logging


def test_defaults():
    s = AppSettings()
    assert s.history_size == 3
    assert s.settings_key == "keysmith.settings.v1"
    assert s.log_file_path is None


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("KEYSMITH_SETTINGS_PATH", str(tmp_path / "x.json"))
    monkeypatch.setenv("KEYSMITH_HISTORY_SIZE", "5")
    monkeypatch.setenv("KEYSMITH_LOG_LEVEL", "DEBUG")
    s = AppSettings()
    assert s.settings_path == Path(tmp_path / "x.json")
    assert s.history_size == 5
    assert s.log_level == "DEBUG"


def test_configure_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    configure_logging(AppSettings(log_file_path=log_file, log_level="INFO"), force=True)
    logger.info("hello from test")
    logger.remove()
    assert "hello from test" in log_file.read_text(encoding="utf-8")
