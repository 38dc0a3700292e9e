"""
Name: Integration Test DB Setup

Responsibilities:
  - Ensure the database schema exists before integration tests run
  - Run Alembic migrations once per test session
  - Truncate tables between tests

Notes:
  - Only runs when RUN_INTEGRATION=1
  - Uses DATABASE_URL from environment (see alembic/env.py)
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from psycopg import connect

from taskmanager.crosscutting.config import get_settings
from taskmanager.infrastructure.db.pool import close_pool, init_pool

DB_USER = os.getenv("POSTGRES_USER", "postgres")
DB_PASSWORD = os.getenv("POSTGRES_PASSWORD", "postgres")
DB_HOST = os.getenv("POSTGRES_HOST", "localhost")
DB_PORT = os.getenv("POSTGRES_HOST_PORT", "5432")
DB_NAME = os.getenv("POSTGRES_DB", "taskmanager")
DEFAULT_DATABASE_URL = (
    f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

RUN_INTEGRATION = os.getenv("RUN_INTEGRATION") == "1"

if RUN_INTEGRATION:
    if os.environ.get("DATABASE_URL", "").startswith("postgresql://test:test@"):
        os.environ["DATABASE_URL"] = DEFAULT_DATABASE_URL


def pytest_collection_modifyitems(config, items) -> None:
    if RUN_INTEGRATION:
        return
    skip = pytest.mark.skip(reason="RUN_INTEGRATION=1 required (PostgreSQL)")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def apply_migrations() -> None:
    """Run Alembic migrations for integration tests."""
    root_dir = Path(__file__).resolve().parents[2]
    config = Config(str(root_dir / "alembic.ini"))
    config.set_main_option("script_location", str(root_dir / "alembic"))
    command.upgrade(config, "head")


@pytest.fixture(scope="session")
def db_pool(apply_migrations):
    get_settings.cache_clear()
    settings = get_settings()
    pool = init_pool(
        database_url=settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    yield pool
    close_pool()


@pytest.fixture
def clean_db(db_pool):
    with connect(os.environ["DATABASE_URL"], autocommit=True) as conn:
        conn.execute("TRUNCATE tasks, users RESTART IDENTITY CASCADE")
    return db_pool
