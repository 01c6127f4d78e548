"""
Pydantic models for saved GHG emission entries.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from carbon_aegis.pydantic_models.emission_form import EmissionFormState
from carbon_aegis.utils.constants import ScopeEnum


class GhgEmissionBase(BaseModel):
    """Base emission entry model."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    scope: ScopeEnum = Field(..., examples=["scope1"])
    category: str = Field(..., max_length=100, examples=["Fuels"])
    source: str = Field("", max_length=200, examples=["Diesel (100% mineral diesel)"])
    activity_data: str = Field(..., max_length=50, description="Quantity as entered", examples=["500"])
    unit: Optional[str] = Field(None, max_length=50, examples=["litres"])
    emission_factor: Optional[str] = Field(None, max_length=50, examples=["2.68"])
    co2_equivalent: Optional[str] = Field(None, max_length=50, examples=["1340"])
    reporting_period: Optional[str] = Field(None, max_length=20, examples=["2024-03"])


class GhgEmissionCreate(GhgEmissionBase):
    """
    Model for creating an emission entry.

    Without ``organizationId`` the entry belongs to the caller's organisation.
    """

    organization_id: Optional[int] = Field(None, examples=[1])


class GhgEmissionPydModel(GhgEmissionBase):
    """Model for emission entry response."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    organization_id: int
    created_at: datetime
    updated_at: datetime


class EmissionCalculateRequest(EmissionFormState):
    """Filled-in entry form submitted for server-side calculation and save."""

    reporting_period: Optional[str] = Field(None, examples=["2024-03"])
    organization_id: Optional[int] = Field(None, examples=[1])
