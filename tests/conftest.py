"""
Pytest configuration and fixtures.

Every test gets a fresh in-memory SQLite database. The settings are
pinned through environment variables before ``gymapi`` is imported.
"""

import os

os.environ["SECRET_KEY"] = "test-secret-key-not-for-production-0123456789"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import gymapi.db.base  # noqa: F401
from gymapi.db.session import get_db
from gymapi.main import app
from gymapi.models.exercise import Exercise
from gymapi.models.user import Role
from gymapi.schemas.user import UserCreate
from gymapi.services.user_service import UserService

DEFAULT_PASSWORD = "Password123"


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ======================================================================
# Factories
# ======================================================================


@pytest.fixture
def make_user(db):
    """Register a user through the service. Returns ``(user, token)``."""

    def _make(email: str = "athlete@gym.com", role: Role = Role.ATHLETE, name: str = "Test User",
              password: str = DEFAULT_PASSWORD):
        return UserService(db).register(UserCreate(email=email, password=password, name=name, role=role))

    return _make


@pytest.fixture
def make_exercise(db):
    def _make(name: str = "Bench Press", description: str = None) -> Exercise:
        exercise = Exercise(name=name, description=description)
        db.add(exercise)
        db.commit()
        db.refresh(exercise)
        return exercise

    return _make


@pytest.fixture
def athlete(make_user):
    return make_user("athlete@gym.com", Role.ATHLETE, "Juan")[0]


@pytest.fixture
def trainer(make_user):
    return make_user("trainer@gym.com", Role.TRAINER, "Carlos")[0]


@pytest.fixture
def exercises(make_exercise):
    return [make_exercise("Bench Press"), make_exercise("Squat"), make_exercise("Deadlift")]
