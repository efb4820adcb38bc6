"""Shared test fixtures."""

import pytest

from forex import ForexClient, MockResolver


@pytest.fixture
def resolver():
    """Provide a fresh MockResolver that records each call."""
    return MockResolver()


@pytest.fixture
def client(resolver):
    return ForexClient(resolver)
