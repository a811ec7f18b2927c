"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from routine_tracker.config import config
from routine_tracker.db import init_db
from routine_tracker.models import Routine
from routine_tracker.services import RoutineService
from routine_tracker.web import create_app


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
async def db_path(temp_db_path):
    """A temporary database with the schema in place."""
    await init_db(temp_db_path)
    return temp_db_path


@pytest.fixture
def service(db_path):
    return RoutineService(db_path)


@pytest.fixture
def client(temp_db_path):
    """API client backed by a fresh database."""
    app = create_app(temp_db_path)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def configured_db(temp_db_path, monkeypatch):
    """Point the configuration at the temporary database."""
    monkeypatch.setattr(config, "DATABASE_PATH", str(temp_db_path))
    return temp_db_path


@pytest.fixture
def dated_routines():
    """Routines for one user with distinct dates, a third of them completed."""
    start = datetime(2024, 1, 1, 7, 30)
    return [
        Routine(
            user_id="alice",
            description=f"Session {i}",
            is_completed=i % 3 == 0,
            date=start + timedelta(days=i),
        )
        for i in range(25)
    ]
