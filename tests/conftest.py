from __future__ import annotations

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from daily_report.core import security
from daily_report.core.clock import get_today
from daily_report.core.enums import Role
from daily_report.db import models
from daily_report.db.models import Base
from daily_report.db.session import enable_sqlite_foreign_keys, get_db
from daily_report.main import app
from daily_report.schemas.token import SessionClaims
from daily_report.services import workforce

TODAY = "2026-03-10"
YESTERDAY = "2026-03-09"
TOMORROW = "2026-03-11"


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin(db):
    return workforce.seed(db, "admin@company.com", "admin123")


@pytest.fixture
def alice(db):
    return workforce.create_employee(db, "Alice Cooper", "alice@co", "alice-pass", "01/01/1990")


@pytest.fixture
def bob(db):
    return workforce.create_employee(db, "Bob Marley", "bob@co", "bob-pass")


def claims_for(principal: models.Principal) -> SessionClaims:
    return SessionClaims(
        principal_id=principal.id,
        role=Role(principal.role),
        employee_id=principal.employee_id,
        name=principal.name,
    )


def auth_header(principal: models.Principal) -> dict:
    return {"Authorization": f"Bearer {security.create_access_token(principal)}"}
