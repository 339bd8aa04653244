"""Shared fixtures for the EcoQuiz tests."""

import random

import pytest
from fastapi.testclient import TestClient

from ecoquiz.api.main import create_app
from ecoquiz.config import Settings
from ecoquiz.storage.memory_store import MemoryStore

# Answer key of quiz 1, "Sustentabilidade Básica"
SUSTENTABILIDADE_KEY = [0, 3, 2, 1, 1]


@pytest.fixture
def settings():
    return Settings(token_secret="ecoquiz-test-secret-0123456789abcdef", token_ttl_seconds=3600, cors_allow_origins=["*"])


@pytest.fixture
def store():
    return MemoryStore.with_demo_data(rng=random.Random(1234))


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def demo_token(client):
    response = client.post("/api/auth/login", json={"username": "demo", "password": "demo"})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(demo_token):
    return {"Authorization": f"Bearer {demo_token}"}
