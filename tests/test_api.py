"""
Calculation API tests (routers/calculations.py).

Tests:
1-3.  POST /api/calculations/transaction (incl. display strings, currency symbol)
4-5.  Request validation (422) and misconfigured defaults (400)
6.    POST /api/calculations/compare
7.    POST /api/calculations/summary
8-9.  GET /api/calculations/defaults, GET /health
"""

import pytest

from fishledger.config import settings


# ============================================================
# 1-3. Single transaction
# ============================================================

def test_calculate_method_a(client, reference_payload):
    response = client.post("/api/calculations/transaction", json={
        **reference_payload, "deduction_method": "A",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["net_weight_kg"] == 14.915
    assert data["base_amount"] == 1789.80
    assert data["commission_amount"] == 35.80
    assert data["final_amount"] == 1825.60
    assert data["deduction_method"] == "A"
    assert data["gross_weight_kg"] == 15.7
    assert data["net_weight_display"] == "14.915"
    assert data["final_amount_display"] == "₹1,825.60"


def test_calculate_defaults_to_method_b(client):
    """The transaction form preselects Method B."""
    response = client.post("/api/calculations/transaction", json={
        "gross_weight_kg": 15.7, "rate_per_kg": 120,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["deduction_method"] == "B"
    assert data["net_weight_kg"] == 14.95
    assert data["commission_percent"] == 2.0
    assert data["final_amount"] == 1829.88


def test_calculate_custom_percentages(client):
    response = client.post("/api/calculations/transaction", json={
        "gross_weight_kg": 15.7, "rate_per_kg": 120, "deduction_method": "A",
        "deduction_percent": 10, "commission_percent": 0,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["net_weight_kg"] == 14.13
    assert data["final_amount"] == data["base_amount"] == 1695.60


def test_display_uses_configured_currency_symbol(client, monkeypatch):
    monkeypatch.setattr(settings, "CURRENCY_SYMBOL", "Rs.")
    response = client.post("/api/calculations/transaction", json={
        "gross_weight_kg": 15.7, "rate_per_kg": 120, "deduction_method": "B",
    })
    assert response.status_code == 200
    assert response.json()["final_amount_display"] == "Rs.1,829.88"
    assert client.get("/api/calculations/defaults").json()["currency_symbol"] == "Rs."


# ============================================================
# 4-5. Validation
# ============================================================

@pytest.mark.parametrize("overrides", [
    {"gross_weight_kg": 0},
    {"gross_weight_kg": -1.5},
    {"rate_per_kg": 0},
    {"rate_per_kg": "abc"},
    {"deduction_method": "C"},
    {"deduction_percent": -1},
    {"commission_percent": 150},
])
def test_calculate_rejects_invalid_input(client, reference_payload, overrides):
    response = client.post("/api/calculations/transaction", json={
        **reference_payload, **overrides,
    })
    assert response.status_code == 422


def test_misconfigured_default_method_is_400(client, monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_DEDUCTION_METHOD", "X")
    response = client.post("/api/calculations/transaction", json={
        "gross_weight_kg": 15.7, "rate_per_kg": 120,
    })
    assert response.status_code == 400
    assert "Invalid deduction method" in response.json()["detail"]

    assert client.get("/api/calculations/defaults").status_code == 400


# ============================================================
# 6. Compare
# ============================================================

def test_compare_methods(client, reference_payload):
    response = client.post("/api/calculations/compare", json=reference_payload)
    assert response.status_code == 200
    data = response.json()
    assert data["method_a"]["final_amount"] == 1825.60
    assert data["method_b"]["final_amount"] == 1829.88
    assert data["net_weight_diff"] == 0.035
    assert data["final_amount_diff"] == 4.28


# ============================================================
# 7. Summary
# ============================================================

def test_summary(client):
    response = client.post("/api/calculations/summary", json={"transactions": [
        {"gross_weight_kg": 15.7, "rate_per_kg": 120, "deduction_method": "A"},
        {"gross_weight_kg": 15.7, "rate_per_kg": 120, "deduction_method": "B"},
    ]})
    assert response.status_code == 200
    data = response.json()
    assert data["total_transactions"] == 2
    assert data["total_net_weight"] == 29.865
    assert data["total_commission"] == 71.68
    assert data["total_final_amount"] == 3655.48


def test_summary_empty(client):
    response = client.post("/api/calculations/summary", json={"transactions": []})
    assert response.status_code == 200
    assert response.json()["total_transactions"] == 0


# ============================================================
# 8-9. Defaults and health
# ============================================================

def test_defaults(client):
    response = client.get("/api/calculations/defaults")
    assert response.status_code == 200
    assert response.json() == {
        "deduction_method": "B",
        "deduction_method_label": "Kilogram-Only Deduction",
        "deduction_percent": 5.0,
        "commission_percent": 2.0,
        "currency_symbol": "₹",
    }


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "app": "fishledger"}
