"""Settings: database URL normalization and defaults."""

from restaurantes_api.config import Settings


def test_postgresql_url_gets_async_driver():
    s = Settings(database_url="postgresql://u:p@host:5432/db")
    assert s.database_url == "postgresql+psycopg://u:p@host:5432/db"


def test_postgres_scheme_alias_gets_async_driver():
    s = Settings(database_url="postgres://u:p@host/db")
    assert s.database_url == "postgresql+psycopg://u:p@host/db"


def test_explicit_driver_url_is_kept():
    url = "sqlite+aiosqlite:///:memory:"
    assert Settings(database_url=url).database_url == url


def test_default_port_is_3000(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert Settings().port == 3000
