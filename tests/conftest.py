# tests/conftest.py
import os
import random
import sys
import tempfile
from pathlib import Path

import pytest

# Add project root to sys.path so "numberpath" and "utils" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# keep the app away from the on-disk database and log file
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("LOG_FILE", str(Path(tempfile.gettempdir()) / "numberpath_test_errors.log"))

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from numberpath.core.database import Base, get_db
from numberpath.engine import GameState, Position, PuzzleInstance, Topology
from numberpath.main import app


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def db_session():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    yield db
    db.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_puzzle(rows, cols, full_path, hints, obstacles=(), topology=Topology.ORTHOGONAL):
    """Hand-built puzzle instance for session tests"""
    return PuzzleInstance(
        rows=rows,
        cols=cols,
        topology=Topology(topology),
        obstacles=frozenset(Position(*pos) for pos in obstacles),
        hints={Position(*pos): step for pos, step in hints.items()},
        full_path=tuple(Position(*pos) for pos in full_path),
    )


@pytest.fixture
def make_game():
    def _make_game(*args, **kwargs):
        return GameState(make_puzzle(*args, **kwargs))
    return _make_game
