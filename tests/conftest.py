"""Shared fixtures for the API tests."""

import pytest
from fastapi.testclient import TestClient

from tictactoe.main import app, get_controller
from tictactoe.presentation import GameController


@pytest.fixture
def controller() -> GameController:
    return GameController()


@pytest.fixture
def client(controller: GameController):
    """Client bound to a fresh controller so tests never share a game."""

    app.dependency_overrides[get_controller] = lambda: controller
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
