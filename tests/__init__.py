#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v

Database tests run against an in-memory SQLite database, so no external
services are needed. Set TEST_DATABASE_URL to run them against another
database instead (e.g. PostgreSQL).
"""

import os
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import sessionmaker

from database.database import build_engine, build_session_factory, init_db

TEST_DB_URL = os.environ.get("TEST_DATABASE_URL", "sqlite://")

TEST_USER_ID = "user-1"
OTHER_USER_ID = "user-2"


def create_test_session_factory(url: Optional[str] = None) -> sessionmaker:
    """Create a fresh database with all tables and return its session factory."""
    engine = build_engine(url or TEST_DB_URL)
    init_db(engine)
    return build_session_factory(engine)


def ball_fields(**overrides):
    """Valid BowlingBall column values, with overrides."""
    fields = {
        "name": "Phaze II",
        "brand": "Storm",
        "weight": 15,
        "core_type": "symmetrical",
        "coverstock_type": "reactive",
        "surface": "2000 Abralon",
        "drilling": "Pin Up 4.5",
        "hook_potential": "medium",
    }
    fields.update(overrides)
    return fields


def pattern_fields(**overrides):
    """Valid OilPattern column values, with overrides."""
    fields = {
        "name": "Kegel Stone Street",
        "category": "kegel",
        "length": 39,
        "volume": "22.0",
        "ratio": "3.06:1",
        "difficulty": "medium",
    }
    fields.update(overrides)
    return fields


def game_fields(ball_id: str, pattern_id: str, **overrides):
    """Valid PerformanceData column values, with overrides."""
    fields = {
        "ball_id": ball_id,
        "pattern_id": pattern_id,
        "venue": "Sunset Lanes",
        "score": 200,
        "carry_percentage": 85.0,
        "entry_angle": 5.5,
        "game_date": datetime(2026, 3, 1, 19, 0),
    }
    fields.update(overrides)
    return fields


class ApiTestCase:
    """
    Mixin for API tests: a TestClient over the real app, with the database
    dependency pointed at a fresh in-memory database.

    Use with unittest.TestCase: ``class TestX(ApiTestCase, unittest.TestCase)``.
    """

    user_id = TEST_USER_ID

    def setUp(self):
        from fastapi.testclient import TestClient
        from web.backend.app import app
        from web.backend.dependencies import get_db

        self.session_factory = create_test_session_factory()

        def override_get_db():
            session = self.session_factory()
            try:
                yield session
            finally:
                session.close()

        self.app = app
        self.app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(self.app, raise_server_exceptions=False)

    def tearDown(self):
        self.app.dependency_overrides.clear()

    def headers(self, user_id: Optional[str] = None):
        return {"X-User-Id": user_id or self.user_id}

    def create_ball(self, user_id: Optional[str] = None, **overrides):
        response = self.client.post("/api/balls", json=ball_fields(**overrides), headers=self.headers(user_id))
        assert response.status_code == 200, response.text
        return response.json()["ball"]

    def create_pattern(self, **overrides):
        response = self.client.post("/api/patterns", json=pattern_fields(**overrides), headers=self.headers())
        assert response.status_code == 200, response.text
        return response.json()["pattern"]
