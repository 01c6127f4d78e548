"""
API tests for saved emission entries and server-side calculation.
"""

from decimal import Decimal

import pytest
from sqlalchemy import select

from carbon_aegis.database.schemas import GhgEmissionDBModel
from carbon_aegis.test.factory.emission_factor import (
    DeliveryVehicleFactorFactory,
    DieselFactorFactory,
)
from carbon_aegis.test.factory.ghg_emission import GhgEmissionFactory
from carbon_aegis.utils.constants import GHG_EMISSIONS_ENDPOINT

OTHER_ORGANIZATION_ID = 2


@pytest.mark.asyncio
async def test_list_emissions_of_caller_organization(test_async_client):
    await GhgEmissionFactory.create_batch(2)
    await GhgEmissionFactory(organization_id=OTHER_ORGANIZATION_ID)

    response = await test_async_client.get(GHG_EMISSIONS_ENDPOINT)
    assert response.status_code == 200

    data = response.json()
    assert len(data) == 2
    assert all(item["organizationId"] == 1 for item in data)
    assert data[0]["co2Equivalent"] == "250"


@pytest.mark.asyncio
async def test_list_emissions_of_requested_organization(test_async_client):
    await GhgEmissionFactory()
    await GhgEmissionFactory(organization_id=OTHER_ORGANIZATION_ID)

    response = await test_async_client.get(
        GHG_EMISSIONS_ENDPOINT, params={"organizationId": OTHER_ORGANIZATION_ID}
    )
    data = response.json()
    assert len(data) == 1
    assert data[0]["organizationId"] == OTHER_ORGANIZATION_ID


@pytest.mark.asyncio
async def test_create_emission_defaults_to_caller_organization(
    test_async_client, test_db_session
):
    payload = {
        "scope": "scope2",
        "category": "UK electricity",
        "source": "",
        "activityData": "1000",
        "unit": "kWh",
        "emissionFactor": "0.20705",
        "co2Equivalent": "207.05",
        "reportingPeriod": "2024-03",
    }

    response = await test_async_client.post(GHG_EMISSIONS_ENDPOINT, json=payload)
    assert response.status_code == 201

    data = response.json()
    assert data["organizationId"] == 1
    assert data["co2Equivalent"] == "207.05"

    result = await test_db_session.execute(select(GhgEmissionDBModel))
    saved = result.scalars().one()
    assert saved.category == "UK electricity"


@pytest.mark.asyncio
async def test_create_emission_rejects_unknown_scope(test_async_client):
    response = await test_async_client.post(
        GHG_EMISSIONS_ENDPOINT,
        json={"scope": "scope4", "category": "Fuels", "activityData": "1"},
    )
    assert response.status_code == 422
    assert response.json()["message"] == "Validation error"


@pytest.mark.asyncio
async def test_calculate_emission(test_async_client):
    await DieselFactorFactory(ghg_conversion_factor=Decimal("2.5"))

    response = await test_async_client.post(
        f"{GHG_EMISSIONS_ENDPOINT}/calculate",
        json={
            "scope": "scope1",
            "category": "Fuels",
            "fuelType": "Liquid fuels",
            "fuelSubType": "Diesel (100% mineral diesel)",
            "unit": "litres",
            "quantity": "100",
            "reportingPeriod": "2024-05",
        },
    )
    assert response.status_code == 201

    data = response.json()
    assert data["activityData"] == "100"
    assert data["emissionFactor"] == "2.5"
    assert data["co2Equivalent"] == "250"
    assert data["source"] == "Diesel (100% mineral diesel)"
    assert data["reportingPeriod"] == "2024-05"


@pytest.mark.asyncio
async def test_calculate_reports_missing_fields(test_async_client):
    response = await test_async_client.post(
        f"{GHG_EMISSIONS_ENDPOINT}/calculate",
        json={"scope": "scope1", "category": "Fuels", "fuelType": "Liquid fuels"},
    )
    assert response.status_code == 422

    field_errors = response.json()["fieldErrors"]
    assert field_errors["fuelSubType"] == "Fuel sub-type is required"
    assert field_errors["quantity"] == "Quantity is required"
    assert "fuelType" not in field_errors


@pytest.mark.asyncio
async def test_calculate_rejects_category_of_other_scope(test_async_client):
    response = await test_async_client.post(
        f"{GHG_EMISSIONS_ENDPOINT}/calculate",
        json={"scope": "scope2", "category": "Fuels", "quantity": "1"},
    )
    assert response.status_code == 422
    assert "category" in response.json()["fieldErrors"]


@pytest.mark.asyncio
async def test_calculate_without_factor_saves_nothing(test_async_client, test_db_session):
    # a factor for another fuel under the same level1 must not be used
    await DieselFactorFactory()

    response = await test_async_client.post(
        f"{GHG_EMISSIONS_ENDPOINT}/calculate",
        json={
            "scope": "scope1",
            "category": "Fuels",
            "fuelType": "Liquid fuels",
            "fuelSubType": "Gas oil",
            "unit": "litres",
            "quantity": "10",
        },
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Matching factor not found"}

    result = await test_db_session.execute(select(GhgEmissionDBModel))
    assert result.scalars().all() == []


@pytest.mark.asyncio
async def test_calculate_delivery_vehicle_average_without_sub_type(test_async_client):
    await DeliveryVehicleFactorFactory(level1="All Vans (Average)")

    response = await test_async_client.post(
        f"{GHG_EMISSIONS_ENDPOINT}/calculate",
        json={
            "scope": "scope1",
            "category": "Delivery vehicles",
            "fuelType": "All Vans (Average)",
            "unit": "km",
            "quantity": "40",
        },
    )
    assert response.status_code == 201
    assert response.json()["co2Equivalent"] == "10"


@pytest.mark.asyncio
async def test_organization_scoped_routes(test_async_client):
    await GhgEmissionFactory(organization_id=OTHER_ORGANIZATION_ID)

    response = await test_async_client.post(
        f"/api/organizations/{OTHER_ORGANIZATION_ID}/ghg-emissions",
        json={
            "scope": "scope3",
            "category": "Business travel",
            "activityData": "12",
            "organizationId": 99,
        },
    )
    assert response.status_code == 201
    assert response.json()["organizationId"] == OTHER_ORGANIZATION_ID

    response = await test_async_client.get(
        f"/api/organizations/{OTHER_ORGANIZATION_ID}/ghg-emissions"
    )
    assert len(response.json()) == 2
