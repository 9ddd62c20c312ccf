"""Tests for Settings and get_settings()."""

from pushbullet_types.config import Settings, get_settings


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self):
        settings = Settings()
        assert settings.skip_invalid_pushes is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("pushbullet_skip_invalid_pushes", "1")
        assert Settings().skip_invalid_pushes is True

    def test_unrelated_env_ignored(self, monkeypatch):
        monkeypatch.setenv("PUSHBULLET_ACCESS_TOKEN", "o.abc")
        assert Settings().skip_invalid_pushes is False

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()
