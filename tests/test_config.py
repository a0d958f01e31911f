# tests/test_config.py
"""
Configuration Tests - Settings, Validators and Logging Setup

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- simpleswap.config.settings (Settings under test)
- simpleswap.shared.validators (validation helpers)
- simpleswap.shared.logging_conf (setup_logging)
- pytest (testing framework)
"""
import logging

import pytest
from pydantic import ValidationError

from simpleswap.config.settings import DEFAULT_BASE_URL, Settings
from simpleswap.shared.logging_conf import setup_logging
from simpleswap.shared.validators import validate_api_key, validate_base_url


class TestValidators:
    def test_validate_api_key(self):
        assert validate_api_key("0b5f1c2e-6a7d-4e8f-9a0b-1c2d3e4f5a6b")
        assert not validate_api_key("")
        assert validate_api_key("k1")
        assert not validate_api_key("tab\tkey")
        assert not validate_api_key("has a space in it")

    def test_validate_base_url(self):
        assert validate_base_url("https://api.simpleswap.io")
        assert validate_base_url("http://localhost:8080")
        assert not validate_base_url("")
        assert not validate_base_url("api.simpleswap.io")
        assert not validate_base_url("ftp://api.simpleswap.io")


class TestSettings:
    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch):
        for name in ("SIMPLESWAP_API_KEY", "SIMPLESWAP_BASE_URL", "HTTP_TIMEOUT_SECONDS", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.api_key == ""
        assert s.base_url == DEFAULT_BASE_URL
        assert s.http_timeout_seconds == 10
        assert s.log_level_value == logging.INFO
        assert s.log_stdout is False

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("SIMPLESWAP_API_KEY", "0b5f1c2e-6a7d-4e8f")
        monkeypatch.setenv("SIMPLESWAP_BASE_URL", "https://sandbox.example.com/")
        monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "30")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        s = Settings(_env_file=None)
        assert s.api_key == "0b5f1c2e-6a7d-4e8f"
        assert s.base_url == "https://sandbox.example.com"
        assert s.http_timeout_seconds == 30
        assert s.log_level_value == logging.DEBUG

    def test_invalid_api_key(self, monkeypatch):
        monkeypatch.setenv("SIMPLESWAP_API_KEY", "bad key")
        with pytest.raises(ValidationError, match="Invalid SIMPLESWAP_API_KEY format"):
            Settings(_env_file=None)

    def test_invalid_base_url(self, monkeypatch):
        monkeypatch.setenv("SIMPLESWAP_BASE_URL", "not-a-url")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_timeout_bounds(self, monkeypatch):
        monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def _restore_root_logger(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        yield
        for handler in root.handlers:
            if handler not in saved_handlers:
                handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    def test_log_dir_creates_rotating_file(self, tmp_path):
        log_dir = tmp_path / "logs"
        setup_logging(level=logging.DEBUG, log_dir=log_dir, log_to_stdout=False)

        logging.getLogger("simpleswap.test").info("hello file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        log_file = log_dir / "simpleswap.log"
        assert log_file.exists()
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_stdout_handler(self, capsys):
        setup_logging(level=logging.INFO, log_to_stdout=True)
        logging.getLogger("simpleswap.test").warning("to stdout")

        assert "to stdout" in capsys.readouterr().out
