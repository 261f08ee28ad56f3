"""Unit tests for configuration loading and logging setup."""

import logging

import pytest

from sift.config import Config, LoggingConfig, configure_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SIFT_CONFIG_FILE", "SIFT_LOG_FILE", "SIFT_LOADER__BATCH_SIZE", "SIFT_DATABASE__URL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestConfig:
    def test_defaults(self):
        config = Config(_env_file=None)

        assert config.loader.batch_size == 1000
        assert config.database.url == "sqlite:///:memory:"
        assert config.logging.level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SIFT_LOADER__BATCH_SIZE", "50")

        assert Config(_env_file=None).loader.batch_size == 50

    def test_yaml_file(self, monkeypatch, tmp_path):
        config_file = tmp_path / "sift.yaml"
        config_file.write_text("loader:\n  batch_size: 25\ndatabase:\n  url: sqlite:///places.db\n")
        monkeypatch.setenv("SIFT_CONFIG_FILE", str(config_file))

        config = Config(_env_file=None)

        assert config.loader.batch_size == 25
        assert config.database.url == "sqlite:///places.db"

    def test_env_beats_yaml(self, monkeypatch, tmp_path):
        config_file = tmp_path / "sift.yaml"
        config_file.write_text("loader:\n  batch_size: 25\n")
        monkeypatch.setenv("SIFT_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("SIFT_LOADER__BATCH_SIZE", "7")

        assert Config(_env_file=None).loader.batch_size == 7

    def test_missing_yaml_file_ignored(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SIFT_CONFIG_FILE", str(tmp_path / "missing.yaml"))

        assert Config(_env_file=None).loader.batch_size == 1000

    def test_batch_size_must_be_positive(self):
        with pytest.raises(ValueError):
            Config(_env_file=None, loader={"batch_size": 0})


class TestConfigureLogging:
    def test_console_handler(self, restore_root_logger):
        configure_logging(LoggingConfig(level="DEBUG"))

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_handler(self, restore_root_logger, monkeypatch, tmp_path):
        log_file = tmp_path / "logs" / "sift.log"
        monkeypatch.setenv("SIFT_LOG_FILE", str(log_file))

        configure_logging(LoggingConfig(level="INFO"))
        logging.getLogger("sift.test").info("hello")

        root = logging.getLogger()
        assert isinstance(root.handlers[0], logging.FileHandler)
        root.handlers[0].flush()
        assert "hello" in log_file.read_text()
