"""Tests for the infrastructure.db module."""

from sqlalchemy import inspect
from sqlalchemy import create_engine as sa_create_engine

from billing_log.infrastructure import db as db_module
from billing_log.infrastructure.settings import BillingSettings


def test_create_engine_passes_pool_configuration(monkeypatch):
    """_create_engine should configure QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://billings")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://billings"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_create_engine_enables_sqlite_foreign_keys(tmp_path):
    """SQLite engines should enforce foreign keys on every connection."""
    engine = db_module._create_engine(f"sqlite:///{tmp_path / 'test.db'}")

    with engine.connect() as conn:
        enabled = conn.exec_driver_sql("PRAGMA foreign_keys").scalar_one()

    assert enabled == 1
    engine.dispose()


def test_get_engine_caches_engine(monkeypatch):
    """get_engine should memoize the created engine."""
    db_module._engine = None
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(
        db_module.BillingSettings,
        "from_env",
        classmethod(lambda cls: BillingSettings(database_url="sqlite://")),
    )

    engine_one = db_module.get_engine()
    engine_two = db_module.get_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:sqlite://"
    assert created == ["sqlite://"]
    db_module._engine = None


def test_adapter_prefers_injected_engine(monkeypatch):
    """The adapter should use its engine override before the singleton."""
    monkeypatch.setattr(db_module, "get_engine", lambda: "singleton")

    assert db_module.SqlAlchemyDatabaseEngineAdapter().get_engine() == (
        "singleton"
    )
    assert db_module.SqlAlchemyDatabaseEngineAdapter("override").get_engine() == (
        "override"
    )


def test_metadata_declares_billing_tables():
    engine = sa_create_engine("sqlite://")
    db_module.metadata.create_all(engine)

    tables = set(inspect(engine).get_table_names())

    assert {"daily_totals", "daily_line_items", "monthly_budgets"} <= tables
