import pytest
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["HOME_COUNTRY"] = "KR"

from travel_planner.database import init_db
from travel_planner.dependencies import get_repositories
from travel_planner.main import app
from travel_planner.repositories import build_repositories
from travel_planner.services.profile_service import seed_default_user
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def sql_session_factory():
    """A fresh in-memory SQLite schema per test."""
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture(scope="function", params=["memory", "sql"])
def repos(request):
    """Repository set for each storage backend."""
    if request.param == "sql":
        factory = request.getfixturevalue("sql_session_factory")
        return build_repositories("sql", session_factory=factory)
    return build_repositories("memory")


@pytest.fixture(scope="function")
def memory_repos():
    return build_repositories("memory")


@pytest.fixture(scope="function")
def user(memory_repos):
    """The default user (id 1, 15 days of leave) in a fresh memory store."""
    return seed_default_user(memory_repos)


@pytest.fixture(scope="function")
def client(memory_repos, user):
    """Get a TestClient whose requests see the per-test repositories."""
    app.dependency_overrides[get_repositories] = lambda: memory_repos
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def sql_client(sql_session_factory):
    """TestClient backed by the SQLAlchemy repositories."""
    sql_repos = build_repositories("sql", session_factory=sql_session_factory)
    seed_default_user(sql_repos)
    app.dependency_overrides[get_repositories] = lambda: sql_repos
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
