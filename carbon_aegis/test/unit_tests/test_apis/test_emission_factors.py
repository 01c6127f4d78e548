"""
API tests for the emission factor lookup and listing endpoints.
"""

import pytest

from carbon_aegis.test.factory.emission_factor import (
    DieselFactorFactory,
    EmissionFactorFactory,
    UkElectricityFactorFactory,
)
from carbon_aegis.utils.constants import Category, Scope


@pytest.mark.asyncio
async def test_lookup_exact_match(test_async_client):
    factor = await DieselFactorFactory()

    response = await test_async_client.post(
        "/api/emission-factors",
        json={
            "scope": "scope1",
            "categoryId": "Fuels",
            "level1": "Liquid fuels",
            "level2": "Diesel (100% mineral diesel)",
            "uom": "litres",
        },
    )
    assert response.status_code == 200

    data = response.json()
    assert data["conversionFactor"] == "2.66155"
    assert data["result"] == data["conversionFactor"]
    assert data["ghgUnit"] == "kg CO2e"
    assert data["matchMethod"] == "exact"
    assert data["factorId"] == factor.id


@pytest.mark.asyncio
async def test_lookup_not_found(test_async_client):
    await DieselFactorFactory()

    response = await test_async_client.post(
        "/api/emission-factors",
        json={"level1": "Solid fuels", "level2": "Coking coal", "uom": "tonnes"},
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Matching factor not found"}


@pytest.mark.asyncio
async def test_lookup_never_relaxes_unit(test_async_client):
    await DieselFactorFactory(uom="litres")

    response = await test_async_client.post(
        "/api/emission-factors",
        json={"level1": "Liquid fuels", "level2": "Diesel (100% mineral diesel)", "uom": "tonnes"},
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_lookup_requires_level1_or_category(test_async_client):
    response = await test_async_client.post("/api/emission-factors", json={"uom": "kWh"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_lookup_by_category_without_level1(test_async_client):
    await UkElectricityFactorFactory()

    response = await test_async_client.get(
        "/api/emission-factors",
        params={"scope": "scope2", "categoryId": "UK electricity", "uom": "kWh"},
    )
    assert response.status_code == 200
    assert response.json()["conversionFactor"] == "0.20705"


@pytest.mark.asyncio
async def test_lookup_fuzzy_match(test_async_client):
    await DieselFactorFactory()

    response = await test_async_client.get(
        "/api/emission-factors",
        params={
            "level1": "Liquid fuels",
            "level2": "Diesel (100% mineral diesl)",
            "uom": "litres",
        },
    )
    assert response.status_code == 200

    data = response.json()
    assert data["matchMethod"] == "fuzzy"
    assert 0.8 <= float(data["confidence"]) < 1


@pytest.mark.asyncio
async def test_list_emission_factors_empty(test_async_client):
    response = await test_async_client.get("/api/emission-factors/list")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_emission_factors_filtered(test_async_client):
    await EmissionFactorFactory.create_batch(2)
    await UkElectricityFactorFactory()

    response = await test_async_client.get(
        "/api/emission-factors/list", params={"scope": Scope.SCOPE_2}
    )
    assert response.status_code == 200

    data = response.json()
    assert len(data) == 1
    assert data[0]["categoryId"] == Category.UK_ELECTRICITY

    response = await test_async_client.get("/api/emission-factors/list", params={"limit": 2})
    assert len(response.json()) == 2


@pytest.mark.asyncio
async def test_get_emission_factor_by_id(test_async_client):
    factor = await DieselFactorFactory()

    response = await test_async_client.get(f"/api/emission-factors/{factor.id}")
    assert response.status_code == 200
    assert response.json()["level2"] == "Diesel (100% mineral diesel)"

    response = await test_async_client.get(f"/api/emission-factors/{factor.id + 100}")
    assert response.status_code == 404
