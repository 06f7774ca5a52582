from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from conversation.config import Settings
from conversation.main import create_app
from conversation.store import ConversationStore

FIXED_NOW = datetime(2025, 10, 15, 14, 7)


def run_now(callback):
    callback()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def store(settings) -> ConversationStore:
    return ConversationStore.seeded(settings, clock=lambda: FIXED_NOW, scheduler=run_now)


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c
