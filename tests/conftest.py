"""Shared pytest fixtures for Slate tests."""

import pytest

from slate.core.language import Environment


@pytest.fixture
def env() -> Environment:
    """Return a fresh root environment."""
    return Environment()
