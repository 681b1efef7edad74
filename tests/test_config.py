"""
Tests for settings and logging setup.
"""

import logging

from src.state_rankings.models import RankingSortBy
from src.utils import config
from src.utils.logging import get_logger, setup_logging


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self, monkeypatch):
        for var in ("LOG_LEVEL", "LOG_FILE", "NORMALIZE_STATE_NAMES", "RANKINGS_OUTPUT_DIR", "DEFAULT_SORT_BY"):
            monkeypatch.delenv(var, raising=False)
        settings = config.Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.normalize_state_names is False
        assert settings.default_sort_by == RankingSortBy.SCORE

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("NORMALIZE_STATE_NAMES", "true")
        monkeypatch.setenv("DEFAULT_SORT_BY", "alpha")
        settings = config.Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.normalize_state_names is True
        assert settings.default_sort_by == RankingSortBy.ALPHA

    def test_relative_output_dir_resolved(self, monkeypatch):
        monkeypatch.setenv("RANKINGS_OUTPUT_DIR", "reports")
        settings = config.Settings(_env_file=None)
        assert settings.output_dir.is_absolute()
        assert settings.output_dir.name == "reports"

    def test_reload_replaces_global(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        first = config.reload_settings()
        assert config.get_settings() is first
        assert first.log_level == "WARNING"
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert config.reload_settings().log_level == "ERROR"


class TestLogging:
    """Tests for setup_logging."""

    def test_configures_root_logger(self, tmp_path):
        log_file = tmp_path / "logs" / "rankings.log"
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging("debug", str(log_file))
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 2

            get_logger("state_rankings.test").debug("hello")
            for handler in root.handlers:
                handler.flush()
            assert "hello" in log_file.read_text()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_unknown_level_falls_back_to_info(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging("chatty")
            assert root.level == logging.INFO
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_defaults_come_from_settings(self, tmp_path, monkeypatch):
        log_file = tmp_path / "settings.log"
        monkeypatch.setattr(
            config, "_settings",
            config.Settings(_env_file=None, log_level="WARNING", log_file=str(log_file)),
        )
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            assert setup_logging() == logging.WARNING
            assert root.level == logging.WARNING
            assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
            assert logging.getLogger("openpyxl").level == logging.WARNING
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_script_logger_name(self):
        assert get_logger("__main__").name == "state_rankings.cli"
        assert get_logger("src.state_rankings.loader").name == "src.state_rankings.loader"
