import sys
from pathlib import Path

import pytest

# tests/ holds fakes.py
TESTS_DIR = Path(__file__).resolve().parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from existence.catalog.store import CatalogStore  # noqa: E402
from existence.config import settings  # noqa: E402
from fakes import FakeClient, FakeRepo  # noqa: E402

MENU_CHANNEL = 101
STATUS_CHANNEL = 202
NEWS_CHANNEL = 303


@pytest.fixture
def catalog() -> CatalogStore:
    return CatalogStore()


@pytest.fixture
def client() -> FakeClient:
    c = FakeClient()
    c.add_channel(MENU_CHANNEL)
    c.add_channel(STATUS_CHANNEL)
    c.add_channel(NEWS_CHANNEL)
    return c


@pytest.fixture
def repo() -> FakeRepo:
    return FakeRepo()


@pytest.fixture
def channels(monkeypatch):
    monkeypatch.setattr(settings, "DISCORD_CHANNEL_ID", MENU_CHANNEL)
    monkeypatch.setattr(settings, "STATUS_CHANNEL_ID", STATUS_CHANNEL)
    monkeypatch.setattr(settings, "NEWS_CHANNEL_ID", NEWS_CHANNEL)
    monkeypatch.setattr(settings, "STATUS_SEND_DELAY", 0)
    return {"menu": MENU_CHANNEL, "status": STATUS_CHANNEL, "news": NEWS_CHANNEL}
