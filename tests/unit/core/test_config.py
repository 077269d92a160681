import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from curator.core.config import Settings, get_settings


def test_settings_defaults():
    """Test that settings load with correct defaults."""
    get_settings.cache_clear()

    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)

    assert settings.app_name == "Curator"
    assert settings.environment == "development"
    assert settings.debug is False
    assert settings.port == 8000
    assert settings.api_prefix == ""
    assert settings.default_page_size == 10
    assert settings.db_sqlite_foreign_keys is True
    assert settings.is_development is True
    assert settings.is_production is False
    assert settings.is_sqlite is True


def test_settings_env_override():
    """Test that environment variables override defaults."""
    get_settings.cache_clear()

    with patch.dict(os.environ, {
        "CURATOR_ENVIRONMENT": "production",
        "CURATOR_PORT": "9000",
        "CURATOR_DATABASE_URL": "postgresql+asyncpg://u:p@db.example.com/curator",
        "CURATOR_DB_SSL": "true",
    }):
        settings = Settings(_env_file=None)

        assert settings.environment == "production"
        assert settings.port == 9000
        assert settings.is_production is True
        assert settings.is_sqlite is False
        assert settings.db_ssl is True


def test_cors_origins_parsing():
    """Comma-separated strings are split into a list."""
    assert Settings.parse_cors_origins("http://a.com, http://b.com") == [
        "http://a.com",
        "http://b.com",
    ]
    assert Settings.parse_cors_origins(["http://a.com"]) == ["http://a.com"]


def test_sqlite_rejects_multiple_workers():
    with pytest.raises(ValidationError, match="SQLite does not support multiple worker"):
        Settings(_env_file=None, workers=2)


def test_postgres_allows_multiple_workers():
    settings = Settings(
        _env_file=None,
        workers=4,
        database_url="postgresql+asyncpg://u:p@localhost/curator",
    )

    assert settings.workers == 4


def test_database_url_sync():
    sqlite = Settings(_env_file=None, database_url="sqlite+aiosqlite:///./x.db")
    postgres = Settings(
        _env_file=None, database_url="postgresql+asyncpg://u:p@localhost/curator"
    )

    assert sqlite.database_url_sync == "sqlite:///./x.db"
    assert postgres.database_url_sync == "postgresql://u:p@localhost/curator"


def test_get_settings_is_cached():
    get_settings.cache_clear()

    assert get_settings() is get_settings()
