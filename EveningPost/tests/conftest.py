from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from EveningPost.api.main import create_app
from EveningPost.core.config import Settings
from EveningPost.core.seed_data import seed_store
from EveningPost.core.storage import ContentStore


@pytest.fixture()
def store() -> ContentStore:
    content_store = ContentStore(rng=random.Random(1234))
    seed_store(content_store)
    return content_store


@pytest.fixture()
def settings() -> Settings:
    return Settings(LOG_LEVEL="WARNING")


@pytest.fixture()
def client(settings: Settings, store: ContentStore) -> TestClient:
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
