"""Tests for the Config system."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pobsd.config import Config, reset_config
from pobsd.core.parser import ParsingMode
from pobsd.models.search_type import SearchType


@pytest.fixture(autouse=True)
def _clean_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(config_dir=tmp_path)


class TestConfig:
    def test_default_values(self, config: Config) -> None:
        assert config.database_path is None
        assert config.parsing_mode is ParsingMode.RELAXED
        assert config.search_type is SearchType.NOT_CASE_SENSITIVE
        assert config.log_level == "INFO"
        assert not config.log_to_file

    def test_set_and_get(self, config: Config) -> None:
        with config.batch_update():
            config.set("database_path", "/some/games.db")
        assert config.database_path == Path("/some/games.db")
        assert config.get("logging.level") == "INFO"
        assert config.get("no.such.key", 3) == 3

    def test_batch_update_writes_once(self, config: Config, tmp_path: Path) -> None:
        with config.batch_update():
            config.set("parsing_mode", "strict")
            config.set("logging.level", "debug")
            assert not (tmp_path / "config.json").exists()
        saved = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
        assert saved["parsing_mode"] == "strict"
        assert saved["logging"] == {"level": "debug", "to_file": False}
        assert config.log_level == "DEBUG"

    def test_typed_setters(self, config: Config, tmp_path: Path) -> None:
        config.parsing_mode = ParsingMode.STRICT
        config.search_type = SearchType.CASE_SENSITIVE
        config.database_path = tmp_path / "games.db"
        reloaded = Config(config_dir=tmp_path)
        assert reloaded.parsing_mode is ParsingMode.STRICT
        assert reloaded.search_type is SearchType.CASE_SENSITIVE
        assert reloaded.database_path == tmp_path / "games.db"

    def test_clear_database_path(self, config: Config) -> None:
        config.database_path = Path("/x.db")
        config.database_path = None
        assert config.database_path is None

    def test_invalid_values_fall_back(self, config: Config) -> None:
        with config.batch_update():
            config.set("parsing_mode", "sloppy")
            config.set("search_type", "fuzzy")
        assert config.parsing_mode is ParsingMode.RELAXED
        assert config.search_type is SearchType.NOT_CASE_SENSITIVE

    def test_merges_partial_file(self, tmp_path: Path) -> None:
        (tmp_path / "config.json").write_text(
            json.dumps({"logging": {"to_file": True}}), encoding="utf-8"
        )
        config = Config(config_dir=tmp_path)
        assert config.log_to_file
        assert config.log_level == "INFO"

    def test_corrupt_file_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
        config = Config(config_dir=tmp_path)
        assert config.parsing_mode is ParsingMode.RELAXED
