"""Shared test fixtures.

Provides a temporary SQLite database built from ``db/schema.sql`` and
``db/seeds.sql``, an open ``Database`` handle on it, and a FastAPI
``TestClient`` whose lifespan opens that same file.
"""

import sqlite3
from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.db.sqlite import Database

DB_DIR = Path(__file__).resolve().parents[1] / "db"


@pytest.fixture()
def database_path(tmp_path: Path) -> Path:
    """Create a seeded election database in a temp directory."""
    path = tmp_path / "election.db"
    conn = sqlite3.connect(path)
    try:
        conn.executescript((DB_DIR / "schema.sql").read_text(encoding="utf-8"))
        conn.executescript((DB_DIR / "seeds.sql").read_text(encoding="utf-8"))
    finally:
        conn.close()
    return path


@pytest.fixture()
def db(database_path: Path) -> Generator[Database, None, None]:
    """Provide an open handle on the seeded database."""
    handle = Database(str(database_path))
    handle.open()
    yield handle
    handle.close()


@pytest.fixture()
def test_client(
    database_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient served from the seeded database."""
    monkeypatch.setattr(settings, "DATABASE_PATH", str(database_path))
    from app.main import app

    with TestClient(app) as client:
        yield client
