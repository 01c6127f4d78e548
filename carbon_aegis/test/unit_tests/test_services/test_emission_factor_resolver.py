"""
Tests for the emission factor resolver.
"""

from decimal import Decimal

import pytest

from carbon_aegis.pydantic_models.emission_factor import EmissionFactorLookup, FactorQuery
from carbon_aegis.pydantic_models.emission_form import EmissionFormState
from carbon_aegis.services.exceptions import LookupNotFoundError
from carbon_aegis.services.resolvers import EmissionFactorResolver


class StubLookupService:
    def __init__(self, lookup=None):
        self.lookup = lookup
        self.queries: list[FactorQuery] = []

    async def lookup_factor(self, query: FactorQuery):
        self.queries.append(query)
        return self.lookup


@pytest.mark.asyncio
async def test_resolve_returns_lookup():
    lookup = EmissionFactorLookup(conversion_factor=Decimal("2.68"), result=Decimal("2.68"))
    resolver = EmissionFactorResolver(StubLookupService(lookup))

    resolved = await resolver.resolve_factor("scope1", "Fuels", "Liquid fuels", "Gas oil", "litres")

    assert resolved is lookup


@pytest.mark.asyncio
async def test_unmatched_lookup_raises():
    resolver = EmissionFactorResolver(StubLookupService(None))

    with pytest.raises(LookupNotFoundError) as exc_info:
        await resolver.resolve(FactorQuery(level1="Liquid fuels"))

    assert exc_info.value.message == "Matching factor not found"
    assert exc_info.value.query.level1 == "Liquid fuels"


@pytest.mark.asyncio
async def test_non_finite_factor_raises():
    lookup = EmissionFactorLookup(conversion_factor=Decimal("NaN"), result=Decimal("NaN"))
    resolver = EmissionFactorResolver(StubLookupService(lookup))

    with pytest.raises(LookupNotFoundError):
        await resolver.resolve(FactorQuery(level1="Liquid fuels"))


@pytest.mark.asyncio
async def test_resolve_for_form_builds_query():
    service = StubLookupService(
        EmissionFactorLookup(conversion_factor=Decimal("0.25"), result=Decimal("0.25"))
    )
    form = EmissionFormState(fuel_type="All HGVs (Average)", unit="km")

    await EmissionFactorResolver(service).resolve_for_form("scope1", "Delivery vehicles", form)

    assert service.queries[0].as_params() == {
        "scope": "scope1",
        "categoryId": "Delivery vehicles",
        "level1": "All HGVs (Average)",
        "level2": "HGV (all diesel)",
        "uom": "km",
    }
