"""
Emission aggregation for the emissions dashboard.

The module-level functions are pure: they take saved records (ORM rows,
pydantic models or plain dicts with either wire or attribute names) and sum
their co2Equivalent by scope, reporting period and category. A missing or
non-numeric co2Equivalent counts as zero.

``EmissionAggregator`` loads an organisation's records and builds the whole
overview.
"""

import logging
from decimal import Decimal
from typing import Any, Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from carbon_aegis.database.repositories import GhgEmissionRepository
from carbon_aegis.pydantic_models.emission_summary import (
    CategoryTotal,
    EmissionsOverview,
    MonthlyTotals,
    ScopeTotals,
)
from carbon_aegis.services import taxonomy
from carbon_aegis.services.builders.unit_converter import UnitConverter
from carbon_aegis.utils.constants import DEFAULT_REPORTING_PERIOD, OTHER_CATEGORY, Scope

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
SCOPES = (Scope.SCOPE_1, Scope.SCOPE_2, Scope.SCOPE_3)


def _get(record: Any, attribute: str, wire_name: str) -> Any:
    if isinstance(record, dict):
        return record.get(wire_name, record.get(attribute))
    return getattr(record, attribute, None)


def _scope_of(record: Any) -> Optional[str]:
    scope = _get(record, "scope", "scope")
    # ScopeEnum members compare by value
    return getattr(scope, "value", scope)


def co2_value(record: Any) -> Decimal:
    """co2Equivalent of a record as Decimal; zero when missing or not a number."""
    value = UnitConverter.to_finite_decimal(_get(record, "co2_equivalent", "co2Equivalent"))
    return ZERO if value is None else value


def category_bucket(category: Optional[str]) -> str:
    """Category a record is summed under; blank and unknown categories go to Other."""
    if not category or not taxonomy.is_known_category(category):
        return OTHER_CATEGORY
    return category


def aggregate_by_scope(records: Iterable[Any]) -> ScopeTotals:
    totals = {scope: ZERO for scope in SCOPES}
    for record in records:
        scope = _scope_of(record)
        if scope in totals:
            totals[scope] += co2_value(record)

    return ScopeTotals(
        scope1_total=totals[Scope.SCOPE_1],
        scope2_total=totals[Scope.SCOPE_2],
        scope3_total=totals[Scope.SCOPE_3],
    )


def aggregate_by_month(records: Iterable[Any]) -> list[MonthlyTotals]:
    """
    Sum records per reporting period.

    Records without a period count as 2024-01, records of an unknown scope are
    left out as in aggregate_by_scope. The month label is the part of the
    period after the first dash, or the whole period when it has none.

    Returns:
        One entry per period, sorted by period
    """
    buckets: dict[str, dict[str, Decimal]] = {}
    for record in records:
        scope = _scope_of(record)
        if scope not in SCOPES:
            continue
        period = _get(record, "reporting_period", "reportingPeriod") or DEFAULT_REPORTING_PERIOD
        bucket = buckets.setdefault(period, {scope: ZERO for scope in SCOPES} | {"total": ZERO})
        value = co2_value(record)
        bucket[scope] += value
        bucket["total"] += value

    monthly = []
    for period in sorted(buckets):
        bucket = buckets[period]
        monthly.append(
            MonthlyTotals(
                period=period,
                month=period.split("-", 1)[1] if "-" in period else period,
                scope1=bucket[Scope.SCOPE_1],
                scope2=bucket[Scope.SCOPE_2],
                scope3=bucket[Scope.SCOPE_3],
                total=bucket["total"],
            )
        )
    return monthly


def aggregate_by_category(records: Iterable[Any]) -> list[CategoryTotal]:
    """
    Sum records per category, in the order categories are first seen.
    """
    categories: dict[str, CategoryTotal] = {}
    for record in records:
        name = category_bucket(_get(record, "category", "category"))
        if name not in categories:
            categories[name] = CategoryTotal(category=name, value=ZERO, scope=_scope_of(record))
        categories[name].value += co2_value(record)
    return list(categories.values())


def largest_source(categories: list[CategoryTotal]) -> Optional[CategoryTotal]:
    """Category with the highest total; on ties the first one wins."""
    largest = None
    for category in categories:
        if largest is None or category.value > largest.value:
            largest = category
    return largest


def top_areas(categories: list[CategoryTotal], limit: int = 3) -> list[CategoryTotal]:
    """Highest categories first; equal totals keep their original order."""
    return sorted(categories, key=lambda category: category.value, reverse=True)[:limit]


def summarize(records: Iterable[Any], top_areas_limit: int = 3) -> EmissionsOverview:
    """
    Build the dashboard overview of a set of records.
    """
    records = list(records)
    scope_totals = aggregate_by_scope(records)
    monthly = aggregate_by_month(records)
    categories = aggregate_by_category(records)
    total = scope_totals.total

    average_monthly = total / len(monthly) if monthly else ZERO
    scope3_percentage = scope_totals.scope3_total / total * 100 if total else ZERO

    return EmissionsOverview(
        scope_totals=scope_totals,
        total=total,
        monthly=monthly,
        categories=categories,
        largest_source=largest_source(categories),
        top_areas=top_areas(categories, top_areas_limit),
        average_monthly=average_monthly,
        scope3_percentage=scope3_percentage,
        record_count=len(records),
    )


class EmissionAggregator:
    """
    Service building emission overviews from saved records.
    """

    def __init__(self, session: AsyncSession, top_areas_limit: int = 3):
        self.session = session
        self.repo = GhgEmissionRepository(session)
        self.top_areas_limit = top_areas_limit

    async def organization_overview(self, organization_id: int) -> EmissionsOverview:
        records = await self.repo.get_by_organization(organization_id)
        logger.info(f"Aggregating {len(records)} emission records for organization {organization_id}")
        return summarize(records, self.top_areas_limit)
