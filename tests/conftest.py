"""
Shared fixtures. Logs go to a throwaway directory so test runs never write
into the working tree.
"""

import os
import tempfile
from datetime import date

os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="daily_wordle_logs_"))

import pytest

from daily_wordle import create_app
from daily_wordle.config import TestingConfig
from daily_wordle.services.game_service import GameService, initialize_game_service
from daily_wordle.services.puzzle_selector import PuzzleSelector
from daily_wordle.services.stats_service import StatsService
from daily_wordle.storage import InMemoryStore

DAY_ONE = date(2024, 1, 1)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def stats_service(store):
    return StatsService(store)


@pytest.fixture
def selector():
    return PuzzleSelector(["HOMER", "MARGE", "PLANT"])


@pytest.fixture
def game_service(selector, stats_service):
    return GameService(selector, stats_service)


@pytest.fixture
def app(store):
    service = initialize_game_service(TestingConfig, store=store)
    # Single-word rotation so every test knows today's answer
    service.selector = PuzzleSelector(["HOMER"])
    app = create_app(TestingConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
