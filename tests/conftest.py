"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from tests import create_test_session_factory


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def session_factory():
    """Session factory bound to a fresh database with all tables created."""
    return create_test_session_factory()


@pytest.fixture
def db_session(session_factory):
    """A database session, closed after the test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Drop cached configuration so env overrides in one test do not leak."""
    from web.backend.config import get_config
    from web.backend.dependencies import get_db_manager

    get_config.cache_clear()
    get_db_manager.cache_clear()
    yield
    get_config.cache_clear()
    get_db_manager.cache_clear()
