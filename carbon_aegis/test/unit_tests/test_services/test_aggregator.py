"""
Tests for emission aggregation.
"""

from decimal import Decimal

import pytest

from carbon_aegis.services.aggregators import (
    EmissionAggregator,
    aggregate_by_category,
    aggregate_by_month,
    aggregate_by_scope,
    largest_source,
    summarize,
    top_areas,
)
from carbon_aegis.test.factory.ghg_emission import GhgEmissionFactory


def _record(scope, category, co2, period="2024-01"):
    return {"scope": scope, "category": category, "co2Equivalent": co2, "reportingPeriod": period}


def test_empty_records_give_zero_totals():
    totals = aggregate_by_scope([])

    assert totals.scope1_total == totals.scope2_total == totals.scope3_total == 0
    assert totals.total == 0

    overview = summarize([])
    assert overview.largest_source is None
    assert overview.average_monthly == 0
    assert overview.scope3_percentage == 0


def test_scope_totals_ignore_non_numbers():
    records = [
        _record("scope1", "Fuels", "100.5"),
        _record("scope1", "Fuels", "abc"),
        _record("scope2", "UK electricity", None),
        _record("scope3", "Business travel", "NaN"),
        _record("scope2", "UK electricity", "20"),
    ]

    totals = aggregate_by_scope(records)

    assert totals.scope1_total == Decimal("100.5")
    assert totals.scope2_total == Decimal("20")
    assert totals.scope3_total == 0


def test_largest_source_tie_keeps_first():
    categories = aggregate_by_category(
        [
            _record("scope1", "Fuels", "50"),
            _record("scope2", "UK electricity", "80"),
            _record("scope1", "Fuels", "30"),
            _record("scope1", "Bioenergy", "10"),
        ]
    )

    assert [(c.category, c.value) for c in categories] == [
        ("Fuels", Decimal("80")),
        ("UK electricity", Decimal("80")),
        ("Bioenergy", Decimal("10")),
    ]
    assert largest_source(categories).category == "Fuels"
    assert [c.category for c in top_areas(categories, limit=2)] == ["Fuels", "UK electricity"]


def test_unknown_category_goes_to_other():
    categories = aggregate_by_category(
        [
            _record("scope3", "Business travel", "5"),
            _record("scope1", "", "7"),
            _record("scope1", "Fuels", "1"),
        ]
    )

    assert [(c.category, c.value) for c in categories] == [
        ("Other", Decimal("12")),
        ("Fuels", Decimal("1")),
    ]


def test_monthly_totals_sorted_by_period():
    monthly = aggregate_by_month(
        [
            _record("scope2", "UK electricity", "10", "2024-03"),
            _record("scope1", "Fuels", "5", None),
            _record("scope1", "Fuels", "1", "2024-03"),
            _record("scope3", "Business travel", "2", "2024"),
        ]
    )

    assert [(m.period, m.month) for m in monthly] == [
        ("2024", "2024"),
        ("2024-01", "01"),
        ("2024-03", "03"),
    ]
    march = monthly[-1]
    assert (march.scope1, march.scope2, march.total) == (Decimal("1"), Decimal("10"), Decimal("11"))


def test_summarize_percentages():
    overview = summarize(
        [
            _record("scope1", "Fuels", "150", "2024-01"),
            _record("scope3", "Business travel", "50", "2024-02"),
        ]
    )

    assert overview.total == Decimal("200")
    assert overview.average_monthly == Decimal("100")
    assert overview.scope3_percentage == Decimal("25")
    assert overview.record_count == 2


@pytest.mark.asyncio
async def test_organization_overview(test_db_session):
    await GhgEmissionFactory(co2_equivalent="40")
    await GhgEmissionFactory(co2_equivalent="60", reporting_period="2024-02")
    await GhgEmissionFactory(organization_id=2, co2_equivalent="1000")

    overview = await EmissionAggregator(test_db_session).organization_overview(1)

    assert overview.total == Decimal("100")
    assert len(overview.monthly) == 2


def test_unknown_scope_left_out_of_every_total():
    records = [
        _record("scope1", "Fuels", "10"),
        _record("scope9", "Fuels", "50"),
        _record("scope9", "Fuels", "5", period="2024-02"),
    ]

    totals = aggregate_by_scope(records)
    monthly = aggregate_by_month(records)

    assert totals.total == Decimal("10")
    assert [month.period for month in monthly] == ["2024-01"]
    assert sum(month.total for month in monthly) == totals.total
