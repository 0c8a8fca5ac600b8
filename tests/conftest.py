"""
Test configuration and fixtures for the TinyApp URL shortener.
This centralizes all test setup, making individual tests clean.
"""

import random

import pytest
from fastapi.testclient import TestClient
from main import app
from tinyapp.dependencies import get_url_store, get_user_directory, get_visit_tracker
from tinyapp.services.auth import AuthGate
from tinyapp.services.short_code_strategies import RandomShortCodeStrategy
from tinyapp.services.url_store import URLStore
from tinyapp.services.user_directory import UserDirectory
from tinyapp.services.visit_tracker import VisitTracker

# Lowest work factor bcrypt accepts - keeps the suite fast
TEST_BCRYPT_ROUNDS = 4


class CountingRandom:
    """Randomness source that always picks the same character and counts draws"""

    def __init__(self, char: str = "A"):
        self.char = char
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        return self.char


@pytest.fixture(scope="function")
def strategy():
    """Seeded generator so failures are reproducible"""
    return RandomShortCodeStrategy(length=6, max_retries=10, rng=random.Random(1234))


@pytest.fixture(scope="function")
def users(strategy):
    """Fresh, empty user directory for each test"""
    return UserDirectory(rounds=TEST_BCRYPT_ROUNDS, strategy=strategy)


@pytest.fixture(scope="function")
def store(strategy):
    """Fresh, empty URL store for each test"""
    return URLStore(strategy=strategy)


@pytest.fixture(scope="function")
def auth(users):
    return AuthGate(users)


@pytest.fixture(scope="function")
def tracker():
    return VisitTracker()


@pytest.fixture(scope="function")
def alice(users):
    return users.create("alice@example.com", "purple-monkey-dinosaur")


@pytest.fixture(scope="function")
def bob(users):
    return users.create("bob@example.com", "dishwasher-funk")


@pytest.fixture(scope="function")
def client(users, store, tracker):
    """
    Create a test client with the in-memory singletons overridden.
    This is the main fixture that API tests will use.
    """
    app.dependency_overrides[get_user_directory] = lambda: users
    app.dependency_overrides[get_url_store] = lambda: store
    app.dependency_overrides[get_visit_tracker] = lambda: tracker

    # Create test client
    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def make_client(client):
    """Extra clients (separate cookie jars) sharing the same overrides"""
    clients = []

    def _make():
        extra = TestClient(app)
        clients.append(extra)
        return extra

    yield _make

    for extra in clients:
        extra.close()


@pytest.fixture(scope="function")
def counting_rng():
    """Randomness that can only ever produce 'AAAAAA'"""
    return CountingRandom("A")
