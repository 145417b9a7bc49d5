"""Pytest fixtures for the Valentine backend tests."""

import pytest
from fastapi.testclient import TestClient

from valentine_api.app.main import create_app


class FixedRandomSource:
    """Random source that always returns the same index."""

    def __init__(self, index):
        self.index = index
        self.calls = []

    def pick_uniform(self, n):
        self.calls.append(n)
        return self.index


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)
