"""Settings and logging setup tests."""

import json
import logging

import pytest
from pydantic import ValidationError

from genre_shelf.config import DEFAULT_DATA_FILE, Settings, get_settings
from genre_shelf.observability import JSONFormatter, setup_logging


def test_defaults(monkeypatch, clean_settings):
    for name in ("DATA_FILE", "SEED_SAMPLE_DATA", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(f"GENRE_SHELF_{name}", raising=False)
    settings = get_settings()
    assert settings.data_file == DEFAULT_DATA_FILE
    assert settings.seed_sample_data is True
    assert settings.log_level == "INFO"
    assert settings.log_format == "text"


def test_env_overrides(monkeypatch, tmp_path, clean_settings):
    monkeypatch.setenv("GENRE_SHELF_DATA_FILE", str(tmp_path / "books.json"))
    monkeypatch.setenv("GENRE_SHELF_SEED_SAMPLE_DATA", "false")
    monkeypatch.setenv("GENRE_SHELF_LOG_FORMAT", "JSON")
    settings = get_settings()
    assert settings.data_file == tmp_path / "books.json"
    assert settings.seed_sample_data is False
    assert settings.log_format == "json"


def test_get_settings_is_cached(clean_settings):
    assert get_settings() is get_settings()


def test_unknown_log_format_rejected():
    with pytest.raises(ValidationError):
        Settings(log_format="xml")


def test_json_formatter_includes_extras():
    record = logging.LogRecord(
        name="genre_shelf.catalog.router",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="Filtered books by genre",
        args=(),
        exc_info=None,
    )
    record.genre = "Fantasy"
    record.match_count = 2
    payload = json.loads(JSONFormatter().format(record))
    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "genre_shelf.catalog.router"
    assert payload["message"] == "Filtered books by genre"
    assert payload["genre"] == "Fantasy"
    assert payload["match_count"] == 2
    assert "path" not in payload


def test_setup_logging_installs_single_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("debug", "json")
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_log_level_is_normalised(clean_settings, monkeypatch):
    monkeypatch.setenv("GENRE_SHELF_LOG_LEVEL", "warning")
    assert get_settings().log_level == "WARNING"


@pytest.mark.parametrize("level", ["verbose", "BASIC_FORMAT", ""])
def test_unknown_log_level_rejected(level):
    with pytest.raises(ValidationError, match="unknown log level"):
        Settings(log_level=level)


def test_setup_logging_falls_back_to_info_on_unknown_level():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("verbose", "text")
        assert root.level == logging.INFO
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
