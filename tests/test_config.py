"""Settings — defaults and DATABASE_URL normalisation."""

from exercise_tracker.config import Settings


def test_postgres_url_converted_to_asyncpg():
    s = Settings(database_url="postgresql://u:p@host:5432/db")
    assert s.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_other_urls_untouched():
    s = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert s.database_url == "sqlite+aiosqlite:///:memory:"


def test_port_read_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert Settings().port == 8080


def test_defaults():
    s = Settings()
    assert s.cors_origins == ["*"]
    assert s.database_create_all is False
