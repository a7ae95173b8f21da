"""Shared fixtures: an in-memory SQLite store per test."""

import os

# Must be set before profilehub.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from profilehub.db.init_db import init_db
from profilehub.db.repositories.user import UserRepository
from profilehub.schemas.user import SignupRequest
from profilehub.services.user_service import UserService


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def repository(session):
    return UserRepository(session)


@pytest.fixture
def service(repository):
    return UserService(repository)


@pytest.fixture
def jane(service):
    """An active account: jdoe / secret123."""
    return service.signup(SignupRequest(first_name="Jane", last_name="Doe", username="jdoe",
                                        userPassword="secret123"))
