"""
Unit tests for application configuration.
"""

from tenantnotes.config import Settings, get_settings


class TestSettings:
    """Test Settings configuration class."""

    def test_default_settings(self, monkeypatch):
        """Test default settings values."""
        for name in ("DATABASE_URL", "SECRET_KEY", "LOG_DIR", "LOG_LEVEL", "SKIP_LIFESPAN_DB"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.app_name == "Tenant Notes API"
        assert settings.app_version == "1.0.0"
        assert settings.debug is False

        assert settings.host == "0.0.0.0"
        assert settings.port == 8000

        assert settings.database_url.startswith("postgresql+asyncpg://")
        assert settings.skip_lifespan_db is False

        assert settings.algorithm == "HS256"
        assert settings.access_token_expire_minutes == 24 * 60
        assert settings.invitation_expire_hours == 24
        assert settings.free_plan_note_limit == 3
        assert settings.default_page_size == 10
        assert settings.max_page_size == 100
        assert settings.log_dir == "logs"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("FREE_PLAN_NOTE_LIMIT", "5")
        monkeypatch.setenv("FRONTEND_URL", "https://notes.example.com")
        monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15")

        settings = Settings(_env_file=None)

        assert settings.free_plan_note_limit == 5
        assert settings.frontend_url == "https://notes.example.com"
        assert settings.access_token_expire_minutes == 15

    def test_get_settings_returns_singleton(self):
        assert get_settings() is get_settings()
