# tests/conftest.py
"""Shared fixtures: an in-memory SQLite database and a service bound to it."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.database import create_tables
from app.services.vehicle_service import VehicleService, VehicleRules

CURRENT_YEAR = 2026


@pytest.fixture
def session_factory():
    # StaticPool keeps one connection so the in-memory DB survives between sessions
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def service(session_factory, notifier):
    return VehicleService(
        session_factory,
        rules=VehicleRules(
            allowed_colors=["Red", "White", "Black", "Blue", "Gray"],
            max_age_years=20,
            protected_owner="Administrator",
            notify_make="Ferrari",
        ),
        notifier=notifier,
        current_year=lambda: CURRENT_YEAR,
    )

