#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests run without external services:

    # Run all tests
    python -m pytest tests/ -v

    # Skip the SQLite repository tests
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v

Database tests use an in-memory SQLite engine by default. Point
TEST_DATABASE_URL at another database to run them elsewhere.
"""

import os

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

TEST_DB_URL = os.environ.get("TEST_DATABASE_URL", "sqlite://")


def create_test_engine(url: str = TEST_DB_URL):
    """Engine with all capital tables created.

    In-memory SQLite needs a StaticPool so every session sees the same
    connection (and therefore the same tables).
    """
    from database.models import Base

    if url.startswith("sqlite"):
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(url)
    Base.metadata.create_all(engine)
    return engine


def create_test_session_factory(url: str = TEST_DB_URL):
    return sessionmaker(autocommit=False, autoflush=False, bind=create_test_engine(url))
