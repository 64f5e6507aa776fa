# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from roomprice.adapters.reference_market import ReferenceMarketData
from roomprice.api.http import app  # ensures imports resolve; run tests from repo root
from roomprice.services.price_predictor import PricePredictor


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture
def predictor():
    return PricePredictor(market=ReferenceMarketData())


@pytest.fixture
def university_room() -> dict:
    """Private room near campus; prices at 620 against the reference catalogue."""
    return {
        "location": "university",
        "size": 18,
        "room_type": "private",
        "furnished": True,
        "has_wifi": True,
        "has_parking": False,
        "has_kitchen": True,
        "has_laundry": False,
        "has_balcony": False,
        "pets_allowed": False,
        "distance_to_university": 0.5,
        "floor": 1,
    }


@pytest.fixture
def university_room_camel() -> dict:
    """Same room as `university_room`, keyed the way the listing form sends it."""
    return {
        "location": "university",
        "size": 18,
        "roomType": "private",
        "furnished": True,
        "hasWifi": True,
        "hasParking": False,
        "hasKitchen": True,
        "hasLaundry": False,
        "hasBalcony": False,
        "petsAllowed": False,
        "distanceToUniversity": 0.5,
        "floor": 1,
    }
