"""Pytest fixtures: an isolated in-memory database per test."""

import os

import pytest

# Must be set before app.core.config is imported
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient
    from app.db import Base, engine
    from app.main import app

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with TestClient(app) as c:
        yield c
