"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Sample job payloads
"""

import os

# Settings are read at import time; give the app a throwaway database
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DATABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("JSON_LOGS", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from job_board.core.database import Base, get_db
from job_board.models.job import Job  # noqa: F401  registers the jobs table
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_job_data():
    """Minimal valid job payload"""
    return {
        "slug": "eng-1",
        "title": "Engineer",
        "type": "full-time",
        "location_type": "remote",
        "salary": 90000,
        "company_name": "Acme",
        "approved": False,
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def full_job_data(sample_job_data):
    """Job payload with every optional field filled in"""
    return {
        **sample_job_data,
        "slug": "senior-python-developer",
        "title": "Senior Python Developer",
        "location": "Berlin, Germany",
        "description": "Build and run our FastAPI services on PostgreSQL.",
        "application_email": "Jobs@ACME.Com",
        "application_url": "https://acme.com/careers/senior-python-developer",
        "company_logo_url": "https://cdn.acme.com/logo.png",
    }


@pytest.fixture
def create_job(client, db_session):
    """
    Create a job through the API and return its database id.

    The create endpoint does not echo the new row, so the id is read back
    from the database (the newest row).
    """
    def _create(payload):
        response = client.post("/api/jobs", json=payload)
        assert response.status_code == 201
        newest = db_session.query(Job).order_by(Job.id.desc()).first()
        return newest.id

    return _create
