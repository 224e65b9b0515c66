"""Tests pour Settings (pydantic-settings)."""

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from hexamessage.config import Settings


class TestSettings:
    """Tests des valeurs par defaut et des surcharges."""

    def test_defaults(self, monkeypatch):
        for key in ("HEXAMESSAGE_PORT", "HEXAMESSAGE_HOST", "HEXAMESSAGE_LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)

        settings = Settings(_env_file=None)

        assert settings.app_name == "HexaMessage"
        assert settings.host == "127.0.0.1"
        assert settings.port == 8000
        assert settings.log_level == "INFO"
        assert settings.log_file == Path("logs/hexamessage.log")

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("HEXAMESSAGE_PORT", "9001")
        monkeypatch.setenv("HEXAMESSAGE_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.port == 9001
        assert settings.log_level == "DEBUG"

    def test_log_file_expands_home(self):
        settings = Settings(_env_file=None, log_file="~/hexa.log")
        assert settings.log_file == Path("~/hexa.log").expanduser()

    def test_unknown_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, log_level="LOUD")

    @pytest.mark.parametrize("port", [0, 70000])
    def test_port_out_of_range_rejected(self, port):
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, port=port)
