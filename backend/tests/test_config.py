"""Startup configuration: the database endpoint and token secret are required."""
import pytest

from foodshare.config import ConfigurationError, load_settings
from foodshare.database import normalize_database_url


def test_missing_required_settings_is_fatal(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(ConfigurationError) as exc:
        load_settings(_env_file=None)
    assert "DATABASE_URL" in str(exc.value)
    assert "JWT_SECRET" in str(exc.value)


def test_one_missing_setting_is_named(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://db/foodshare")
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(ConfigurationError, match="JWT_SECRET"):
        load_settings(_env_file=None)


def test_settings_load_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://db/foodshare")
    monkeypatch.setenv("JWT_SECRET", "s3cret")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = load_settings(_env_file=None)
    assert settings.JWT_SECRET == "s3cret"
    assert settings.JWT_AUDIENCE == "authenticated"
    assert settings.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize("url, expected", [
    ("postgresql://u:p@host/db", "postgresql+psycopg://u:p@host/db"),
    ("postgres://u:p@host/db", "postgresql+psycopg://u:p@host/db"),
    ("sqlite://", "sqlite://"),
])
def test_normalize_database_url(url, expected):
    assert normalize_database_url(url) == expected
