"""
Shared pytest fixtures for the dashboard seeder test suite.

Every test that touches a database gets its own SQLite file under tmp_path,
selected through DATABASE_URL exactly the way production selects Postgres.
"""
import pytest
from sqlalchemy import func, inspect, select

from app.core.database import get_engine
from app.core.models import Customer, Invoice, Revenue, User

SEEDED_MODELS = (User, Customer, Invoice, Revenue)


# ── Database selection ────────────────────────────────────────────────────────

@pytest.fixture
def database_url(tmp_path, monkeypatch):
    """Point DATABASE_URL at a fresh SQLite file for one test."""
    url = f"sqlite:///{tmp_path / 'dashboard.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    get_engine.cache_clear()
    yield url
    # release pooled connections before tmp_path is removed
    get_engine(url).dispose()
    get_engine.cache_clear()


@pytest.fixture
def engine(database_url):
    return get_engine(database_url)


@pytest.fixture
def no_database(monkeypatch):
    """Remove DATABASE_URL so the seeder soft-skips."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    get_engine.cache_clear()
    yield
    get_engine.cache_clear()


# ── Helpers ───────────────────────────────────────────────────────────────────

def row_counts(engine):
    """Row count per seeded table; tables that do not exist count as 0."""
    existing = set(inspect(engine).get_table_names())
    counts = {}
    with engine.connect() as conn:
        for model in SEEDED_MODELS:
            name = model.__tablename__
            if name not in existing:
                counts[name] = 0
                continue
            counts[name] = conn.execute(
                select(func.count()).select_from(model.__table__)
            ).scalar_one()
    return counts
