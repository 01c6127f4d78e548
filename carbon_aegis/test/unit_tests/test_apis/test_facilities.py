"""
API tests for facilities.
"""

import pytest

from carbon_aegis.test.factory.facility import FacilityFactory
from carbon_aegis.utils.constants import FACILITIES_ENDPOINT

OTHER_ORGANIZATION_ID = 2


@pytest.mark.asyncio
async def test_list_facilities_of_caller_organization(test_async_client):
    await FacilityFactory.create_batch(2)
    await FacilityFactory(organization_id=OTHER_ORGANIZATION_ID)

    response = await test_async_client.get(FACILITIES_ENDPOINT)
    assert response.status_code == 200

    data = response.json()
    assert len(data) == 2
    assert {"id", "name", "address", "city", "state", "country", "postalCode"} <= set(data[0])


@pytest.mark.asyncio
async def test_create_facility(test_async_client):
    response = await test_async_client.post(
        FACILITIES_ENDPOINT,
        json={"name": "Warehouse", "city": "York", "postalCode": "YO1 7HH", "facilityType": "warehouse"},
    )
    assert response.status_code == 201

    data = response.json()
    assert data["organizationId"] == 1
    assert data["postalCode"] == "YO1 7HH"


@pytest.mark.asyncio
async def test_update_facility(test_async_client):
    facility = await FacilityFactory(name="Old name")

    response = await test_async_client.put(
        f"{FACILITIES_ENDPOINT}/{facility.id}", json={"name": "New name"}
    )
    assert response.status_code == 200

    data = response.json()
    assert data["name"] == "New name"
    assert data["city"] == facility.city


@pytest.mark.asyncio
async def test_facility_of_other_organization_is_not_found(test_async_client):
    facility = await FacilityFactory(organization_id=OTHER_ORGANIZATION_ID)

    response = await test_async_client.put(
        f"{FACILITIES_ENDPOINT}/{facility.id}", json={"name": "Taken over"}
    )
    assert response.status_code == 404

    response = await test_async_client.delete(f"{FACILITIES_ENDPOINT}/{facility.id}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_facility(test_async_client):
    facility = await FacilityFactory()

    response = await test_async_client.delete(f"{FACILITIES_ENDPOINT}/{facility.id}")
    assert response.status_code == 204

    response = await test_async_client.get(FACILITIES_ENDPOINT)
    assert response.json() == []
