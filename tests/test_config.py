"""Tests for config.Config parsing and validation."""
import pytest

from config import Config


class TestEnvParsing:
    """Safe parsers fall back to defaults on bad values."""

    def test_get_int_reads_env(self, monkeypatch):
        monkeypatch.setenv("HORIZONS_TEST_INT", "8080")
        assert Config._get_int("HORIZONS_TEST_INT", 3000) == 8080

    def test_get_int_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("HORIZONS_TEST_INT", raising=False)
        assert Config._get_int("HORIZONS_TEST_INT", 3000) == 3000

    def test_get_int_default_when_invalid(self, monkeypatch):
        monkeypatch.setenv("HORIZONS_TEST_INT", "not-a-port")
        assert Config._get_int("HORIZONS_TEST_INT", 3000) == 3000

    def test_get_float_reads_env(self, monkeypatch):
        monkeypatch.setenv("HORIZONS_TEST_FLOAT", "0.25")
        assert Config._get_float("HORIZONS_TEST_FLOAT", 5.0) == 0.25

    def test_get_float_default_when_invalid(self, monkeypatch):
        monkeypatch.setenv("HORIZONS_TEST_FLOAT", "soon")
        assert Config._get_float("HORIZONS_TEST_FLOAT", 5.0) == 5.0


class TestValidate:
    """Config.validate rejects unusable values."""

    def test_defaults_are_valid(self):
        Config.validate()

    def test_delays_cover_every_kind(self):
        assert set(Config.delays()) == {"image", "short_video", "long_video", "avatar"}

    def test_negative_delay_rejected(self, monkeypatch):
        monkeypatch.setattr(Config, "AVATAR_DELAY_SECONDS", -1.0)
        with pytest.raises(ValueError, match="avatar"):
            Config.validate()

    def test_port_out_of_range_rejected(self, monkeypatch):
        monkeypatch.setattr(Config, "PORT", 70000)
        with pytest.raises(ValueError, match="PORT"):
            Config.validate()
