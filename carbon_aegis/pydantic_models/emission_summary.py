"""
Pydantic models for emission aggregates shown on the dashboard.
"""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ZERO = Decimal("0")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScopeTotals(_CamelModel):
    """CO2e totals per GHG scope."""

    scope1_total: Decimal = Field(ZERO, examples=[Decimal("1340")])
    scope2_total: Decimal = Field(ZERO, examples=[Decimal("2330")])
    scope3_total: Decimal = Field(ZERO, examples=[Decimal("0")])

    @property
    def total(self) -> Decimal:
        return self.scope1_total + self.scope2_total + self.scope3_total


class MonthlyTotals(_CamelModel):
    """CO2e totals of one reporting period."""

    period: str = Field(..., examples=["2024-03"])
    month: str = Field(..., description="Part of the period after the year", examples=["03"])
    scope1: Decimal = ZERO
    scope2: Decimal = ZERO
    scope3: Decimal = ZERO
    total: Decimal = ZERO


class CategoryTotal(_CamelModel):
    """CO2e total of one emission category."""

    category: str = Field(..., examples=["Fuels"])
    value: Decimal = ZERO
    scope: Optional[str] = Field(None, description="Scope of the first record in the category")


class EmissionsOverview(_CamelModel):
    """Everything the emissions dashboard shows."""

    scope_totals: ScopeTotals
    total: Decimal = ZERO
    monthly: list[MonthlyTotals] = Field(default_factory=list)
    categories: list[CategoryTotal] = Field(default_factory=list)
    largest_source: Optional[CategoryTotal] = None
    top_areas: list[CategoryTotal] = Field(default_factory=list)
    average_monthly: Decimal = ZERO
    scope3_percentage: Decimal = ZERO
    record_count: int = 0
