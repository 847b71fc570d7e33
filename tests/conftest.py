# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides user, POS and review fixtures
# - Provides mocked data ports (MagicMock with the port interface as spec)
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("APPROVAL_MIN_COUNT", "3")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from unittest.mock import MagicMock

import pytest

from core.models import (
    ApprovalConfiguration,
    CampusType,
    Pos,
    PosType,
    Review,
    User,
)
from core.ports.data import PosDataService, ReviewDataService, UserDataService


# =============================================================================
# Domain Fixtures
# =============================================================================

@pytest.fixture
def approval_configuration():
    """Approval quorum used by the review service tests."""
    return ApprovalConfiguration(min_count=3)


@pytest.fixture
def users():
    """Three persisted users."""
    return [
        User(
            id=1,
            login_name="jane_doe",
            email_address="jane.doe@uni-heidelberg.de",
            first_name="Jane",
            last_name="Doe",
        ),
        User(
            id=2,
            login_name="maxmustermann",
            email_address="max.mustermann@uni-heidelberg.de",
            first_name="Max",
            last_name="Mustermann",
        ),
        User(
            id=3,
            login_name="student2023",
            email_address="student2023@stud.uni-heidelberg.de",
            first_name="Student",
            last_name="Example",
        ),
    ]


@pytest.fixture
def pos_list():
    """Two persisted points of sale."""
    return [
        Pos(
            id=1,
            name="Schmelzpunkt",
            description="Great waffles",
            type=PosType.CAFE,
            campus=CampusType.ALTSTADT,
            street="Hauptstraße",
            house_number="90",
            postal_code=69117,
            city="Heidelberg",
        ),
        Pos(
            id=2,
            name="Bäcker Görtz",
            description="Walking distance to lecture hall",
            type=PosType.BAKERY,
            campus=CampusType.INF,
            street="Berliner Str.",
            house_number="43",
            postal_code=69120,
            city="Heidelberg",
        ),
    ]


@pytest.fixture
def reviews(users, pos_list):
    """Persisted reviews; the first one is written by users[0] for pos_list[0]."""
    return [
        Review(
            id=1,
            pos=pos_list[0],
            author=users[0],
            review="Great place, friendly staff.",
            approval_count=0,
            approved=False,
        ),
        Review(
            id=2,
            pos=pos_list[0],
            author=users[1],
            review="Coffee was cold.",
            approval_count=1,
            approved=False,
        ),
        Review(
            id=3,
            pos=pos_list[1],
            author=users[2],
            review="Best pretzels on campus.",
            approval_count=3,
            approved=True,
        ),
    ]


# =============================================================================
# Port Mocks
# =============================================================================

@pytest.fixture
def review_data_service():
    """Mocked review port."""
    return MagicMock(spec=ReviewDataService)


@pytest.fixture
def user_data_service():
    """Mocked user port."""
    return MagicMock(spec=UserDataService)


@pytest.fixture
def pos_data_service():
    """Mocked POS port."""
    return MagicMock(spec=PosDataService)
