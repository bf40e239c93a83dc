"""Shared pytest fixtures for consolelog tests."""

import io

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_loguru():
    """Disable loguru output during tests for cleaner output."""
    logger.disable("consolelog")
    yield
    logger.enable("consolelog")


@pytest.fixture(autouse=True)
def no_color_env(monkeypatch):
    """Plain output unless a test asks for colors explicitly."""
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def out():
    """In-memory destination for rendered lines."""
    return io.StringIO()
