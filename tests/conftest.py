# -*- coding: utf-8 -*-

"""
Shared fixtures for Tourdesk tests.

Provides well-formed payloads for every domain object and a TestClient
bound to the application from main.py.
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def valid_package_payload():
    """
    A package creation payload that passes every rule.
    Strings carry surrounding whitespace to exercise normalization.
    """
    return {
        "name": "  Goa Trip  ",
        "description": "Beach",
        "price": 100,
        "duration": 3,
        "destination": " Goa ",
        "inclusions": ["meals"],
        "exclusions": [],
        "itinerary": [{"day": 1, "description": " see beach "}],
        "maxPeople": 4,
        "startDate": "2025-01-01",
        "endDate": "2025-01-05",
    }


@pytest.fixture
def valid_tour_payload():
    """A tour listing creation payload that passes every rule."""
    return {
        "name": " Himalayan Trek ",
        "description": " Ten days in the mountains ",
        "price": 1499.5,
        "duration": 10,
        "destination": " Manali ",
        "startDate": "2025-05-01T06:00:00Z",
        "endDate": "2025-05-11T18:00:00Z",
        "maxPeople": 12,
        "inclusions": [" guide ", "tents"],
        "exclusions": [" flights "],
        "itinerary": [
            {"day": 1, "title": "Arrival", "description": " Meet the group "},
            {"day": 2, "title": "Base camp", "description": "Hike to base camp "},
        ],
        "images": ["https://cdn.example.com/trek.jpg"],
        "agencyId": "agency-42",
    }


@pytest.fixture
def valid_booking_payload():
    """A booking creation payload that passes every rule."""
    return {
        "packageId": "pkg-1001",
        "startDate": "2025-03-15",
        "numberOfPeople": 2,
        "specialRequests": "  vegetarian meals  ",
    }


@pytest.fixture
def test_client():
    """
    TestClient for the FastAPI application.
    Imported lazily so importing conftest does not configure logging.
    """
    from main import app

    with TestClient(app) as client:
        yield client
