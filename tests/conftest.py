from datetime import date

import pytest
from fastapi.testclient import TestClient

from farm_setup.main import app
from farm_setup.models.plan import FARMING_TYPES
from farm_setup.services.planner import calculate_farm_plan
from farm_setup.services.species_rates import get_species_rate


@pytest.fixture
def api():
    return TestClient(app)


@pytest.fixture
def rates():
    return {s: get_species_rate(s) for s in FARMING_TYPES}


@pytest.fixture
def full_plan():
    return calculate_farm_plan(50, list(FARMING_TYPES), today=date(2024, 7, 1))
