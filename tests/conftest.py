"""
Shared test fixtures: reference tables, engine, payloads, API client.
"""

import pytest
from fastapi.testclient import TestClient

from deckframe.core.engine import StructureEngine
from deckframe.reference import default_reference


@pytest.fixture
def reference():
    return default_reference()


@pytest.fixture
def engine(reference):
    return StructureEngine(reference)


@pytest.fixture
def payload():
    """12 x 16 ft free-standing deck on concrete piers, 2x decking."""
    return {
        "width_ft": 12,
        "length_ft": 16,
        "height_ft": 4,
        "attachment": "free",
        "footing_type": "concrete",
        "species_grade": "SPF #2",
        "decking_type": "wood_2x",
    }


@pytest.fixture
def client():
    """FastAPI test client."""
    from deckframe.api.main import app
    return TestClient(app)
