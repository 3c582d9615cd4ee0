"""
Shared test fixtures — API test client, sample transactions.
"""

import os

import pytest
from fastapi.testclient import TestClient

# Pin form defaults before importing app modules
os.environ["DEFAULT_DEDUCTION_METHOD"] = "B"
os.environ["DEFAULT_DEDUCTION_PERCENT"] = "5.00"
os.environ["DEFAULT_COMMISSION_PERCENT"] = "2.00"

from fishledger.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def reference_payload():
    """The 15.700 kg @ 120/kg weighing used in the market's own examples."""
    return {
        "gross_weight_kg": 15.700,
        "rate_per_kg": 120,
        "commission_percent": 2.00,
    }
