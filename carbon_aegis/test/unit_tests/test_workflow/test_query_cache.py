"""
Tests for the query cache.
"""

import pytest

from carbon_aegis.utils.constants import FACILITIES_ENDPOINT, GHG_EMISSIONS_ENDPOINT
from carbon_aegis.workflow import QueryCache, QueryKey


def test_key_ignores_parameter_order_and_none():
    assert QueryKey.of("/x", {"b": 2, "a": 1, "c": None}) == QueryKey.of("/x", {"a": "1", "b": "2"})
    assert QueryKey.of("/x").params_dict == {}


@pytest.mark.asyncio
async def test_fetch_loads_once():
    cache = QueryCache()
    calls = []

    async def loader():
        calls.append(1)
        return ["record"]

    key = QueryKey.of(GHG_EMISSIONS_ENDPOINT)
    assert await cache.fetch(key, loader) == ["record"]
    assert await cache.fetch(key, loader) == ["record"]
    assert len(calls) == 1


def test_invalidate_endpoint_drops_every_variant():
    cache = QueryCache()
    cache.set(QueryKey.of(GHG_EMISSIONS_ENDPOINT), [])
    cache.set(QueryKey.of(GHG_EMISSIONS_ENDPOINT, {"organizationId": 2}), [])
    cache.set(QueryKey.of(FACILITIES_ENDPOINT), [])

    dropped = cache.invalidate(GHG_EMISSIONS_ENDPOINT)

    assert len(dropped) == 2
    assert cache.keys() == [QueryKey.of(FACILITIES_ENDPOINT)]


def test_invalidate_exact_params():
    cache = QueryCache()
    cache.set(QueryKey.of(GHG_EMISSIONS_ENDPOINT), None)
    cache.set(QueryKey.of(GHG_EMISSIONS_ENDPOINT, {"organizationId": 2}), [])

    assert cache.invalidate(GHG_EMISSIONS_ENDPOINT, {}) == [QueryKey.of(GHG_EMISSIONS_ENDPOINT)]
    assert cache.invalidate(GHG_EMISSIONS_ENDPOINT, {"organizationId": 3}) == []
    assert len(cache) == 1
