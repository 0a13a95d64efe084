import os

# AI providers stay unconfigured so every call takes the deterministic fallback path
os.environ["SEALION_API_KEY"] = ""
os.environ["OPENAI_API_KEY"] = ""
os.environ["SESSION_CLEANUP_ENABLED"] = "false"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("REDIS_HOST", "127.0.0.1")
os.environ.setdefault("REDIS_PORT", "1")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import p3_academy.models  # noqa: F401
from p3_academy.api.deps import get_db
from p3_academy.core.security import create_access_token, get_password_hash
from p3_academy.db.session import Base
from p3_academy.main import app
from p3_academy.models.scenario import InterviewScenario
from p3_academy.models.user import User
from p3_academy.services.ai_router import ai_router

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    ai_router.reset_circuit_breakers()
    yield TestClient(app)
    app.dependency_overrides.clear()


def _create_user(db, username: str, role: str = "user") -> User:
    user = User(
        email=f"{username}@example.com",
        username=username,
        hashed_password=get_password_hash("password123"),
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture()
def user(db):
    return _create_user(db, "candidate")


@pytest.fixture()
def other_user(db):
    return _create_user(db, "someone")


@pytest.fixture()
def admin(db):
    return _create_user(db, "admin", role="admin")


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id, [user.role])}"}


@pytest.fixture()
def user_headers(user):
    return auth_headers(user)


@pytest.fixture()
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture()
def scenario(db, admin):
    scenario = InterviewScenario(
        title="Phone Screen - Data Analyst",
        interview_stage="phone-screening",
        industry="Technology",
        job_role="Data Analyst",
        company_background="Regional e-commerce platform",
        role_description="Analyse marketplace data",
        candidate_background="Two years in analytics",
        key_objectives="Assess SQL and communication",
        interviewer_name="Aisha Rahman",
        interviewer_title="Analytics Lead",
        interviewer_style="friendly and structured",
        personality_traits="curious, supportive",
        status="active",
        created_by=admin.id,
    )
    db.add(scenario)
    db.commit()
    db.refresh(scenario)
    return scenario
