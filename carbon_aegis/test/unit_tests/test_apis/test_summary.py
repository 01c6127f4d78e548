"""
API tests for the emissions dashboard summary.
"""

import pytest

from carbon_aegis.test.factory.ghg_emission import GhgEmissionFactory
from carbon_aegis.utils.constants import GHG_EMISSIONS_ENDPOINT


@pytest.mark.asyncio
async def test_summary_of_empty_organization(test_async_client):
    response = await test_async_client.get(f"{GHG_EMISSIONS_ENDPOINT}/summary")
    assert response.status_code == 200

    data = response.json()
    assert data["total"] == "0"
    assert data["monthly"] == []
    assert data["largestSource"] is None
    assert data["recordCount"] == 0


@pytest.mark.asyncio
async def test_summary_totals(test_async_client):
    await GhgEmissionFactory(co2_equivalent="250", reporting_period="2024-01")
    await GhgEmissionFactory(
        scope="scope2",
        category="UK electricity",
        co2_equivalent="150",
        reporting_period="2024-02",
    )
    await GhgEmissionFactory(
        scope="scope3", category="Business travel", co2_equivalent="100", reporting_period="2024-02"
    )

    response = await test_async_client.get(f"{GHG_EMISSIONS_ENDPOINT}/summary")
    assert response.status_code == 200

    data = response.json()
    assert data["recordCount"] == 3
    assert data["scopeTotals"]["scope1Total"] == "250"
    assert data["scopeTotals"]["scope2Total"] == "150"
    assert data["scopeTotals"]["scope3Total"] == "100"
    assert [month["period"] for month in data["monthly"]] == ["2024-01", "2024-02"]
    assert data["largestSource"]["category"] == "Fuels"
    assert [area["category"] for area in data["categories"]] == ["Fuels", "UK electricity", "Other"]
