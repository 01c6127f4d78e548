"""
Pydantic models for emission factors and factor lookups.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EmissionFactorBase(BaseModel):
    """Base emission factor model."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    category_id: Optional[str] = Field(None, max_length=100, description="Emission category")
    scope: Optional[str] = Field(None, max_length=10, description="scope1, scope2 or scope3")
    level1: str = Field(..., max_length=200, description="Top level of the factor hierarchy")
    level2: Optional[str] = Field(None, max_length=200)
    level3: Optional[str] = Field(None, max_length=200)
    level4: Optional[str] = Field(None, max_length=200)
    column_text: Optional[str] = Field(None, max_length=200)
    uom: str = Field(..., max_length=50, description="Unit of the activity quantity")
    ghg_unit: Optional[str] = Field(None, max_length=50, description="Unit of the result")
    ghg_conversion_factor: Decimal = Field(..., description="CO2e per unit of activity")
    year: int = Field(2024, description="Publication year of the factor set")


class EmissionFactorCreate(EmissionFactorBase):
    """Model for creating emission factor."""
    pass


class EmissionFactorPydModel(EmissionFactorBase):
    """Model for emission factor response."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    created_at: datetime
    updated_at: datetime


class FactorQuery(BaseModel):
    """
    Parameters of one factor lookup.

    Sent as the JSON body of ``POST /api/emission-factors`` or as the query
    string of ``GET /api/emission-factors``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    scope: Optional[str] = Field(None, examples=["scope1"])
    category_id: Optional[str] = Field(None, examples=["Fuels"])
    level1: Optional[str] = Field(None, examples=["Liquid fuels"])
    level2: Optional[str] = Field(None, examples=["Diesel (100% mineral diesel)"])
    level3: Optional[str] = Field(None)
    uom: Optional[str] = Field(None, examples=["litres"])

    def as_params(self) -> dict[str, str]:
        """Non-empty fields keyed by their wire names."""
        return {
            key: value
            for key, value in self.model_dump(by_alias=True).items()
            if value not in (None, "")
        }


class EmissionFactorLookup(BaseModel):
    """Resolved conversion factor."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    conversion_factor: Decimal = Field(..., description="Mass CO2e per unit of quantity")
    result: Decimal = Field(..., description="Same value as conversionFactor")
    ghg_unit: Optional[str] = Field(None, examples=["kg CO2e"])
    confidence: Decimal = Field(Decimal("1.0"), description="1.0 for an exact match")
    match_method: str = Field("exact", examples=["exact", "without_level3", "fuzzy"])
    factor_id: Optional[int] = None
