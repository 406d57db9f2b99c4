"""Tests for the infrastructure.db module."""

from sqlalchemy import text

from fundify.infrastructure import db as db_module


def test_get_db_url_reads_environment(monkeypatch):
    """_get_db_url should load .env and return FUNDIFY_DB_URL."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("FUNDIFY_DB_URL", "postgresql://example")

    assert db_module._get_db_url() == "postgresql://example"


def test_get_db_url_defaults_to_sqlite_file(monkeypatch, tmp_path):
    """Without FUNDIFY_DB_URL a SQLite file in the project root is used."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("FUNDIFY_DB_URL", raising=False)
    monkeypatch.setattr(db_module, "get_project_root", lambda: tmp_path)

    assert db_module._get_db_url() == f"sqlite:///{tmp_path / 'fundify.db'}"


def test_create_engine_passes_pool_configuration(monkeypatch):
    """_create_engine should configure QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://records")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://records"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_memory_engine_shares_one_connection():
    """In-memory engines keep data across connections."""
    engine = db_module.create_memory_engine()

    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE sample (value INTEGER)"))
        conn.execute(text("INSERT INTO sample (value) VALUES (7)"))
    with engine.connect() as conn:
        value = conn.execute(text("SELECT value FROM sample")).scalar()

    assert value == 7


def test_get_engine_caches_engine(monkeypatch):
    """get_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("FUNDIFY_DB_URL", "postgresql://records")

    engine_one = db_module.get_engine()
    engine_two = db_module.get_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:postgresql://records"
    assert created == ["postgresql://records"]


def test_adapter_returns_injected_or_global_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should prefer an injected engine."""
    monkeypatch.setattr(db_module, "get_engine", lambda: "global_engine")

    assert db_module.SqlAlchemyDatabaseEngineAdapter().get_engine() == (
        "global_engine"
    )
    assert (
        db_module.SqlAlchemyDatabaseEngineAdapter("local").get_engine()
        == "local"
    )
