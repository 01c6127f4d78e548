"""
API tests for the taxonomy and service endpoints.
"""

import pytest


@pytest.mark.asyncio
async def test_emission_taxonomy(test_async_client):
    response = await test_async_client.get("/api/emission-taxonomy")
    assert response.status_code == 200

    data = response.json()
    assert set(data["scopes"]) == {"scope1", "scope2"}
    scope1 = [category["categoryId"] for category in data["scopes"]["scope1"]]
    assert "Fuels" in scope1
    assert {"value": "district", "label": "District heat and steam"} in data["energyTypeOptions"]


@pytest.mark.asyncio
async def test_fuel_type_options(test_async_client):
    response = await test_async_client.get("/api/emission-taxonomy/fuel-types/Liquid fuels")
    assert response.status_code == 200

    data = response.json()
    assert {"value": "litres", "label": "litres"} in data["units"]
    assert any(option["value"] == "Gas oil" for option in data["fuelSubTypes"])


@pytest.mark.asyncio
async def test_health(test_async_client):
    response = await test_async_client.get("/health")
    assert response.json()["status"] == "healthy"
