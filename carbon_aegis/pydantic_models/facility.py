"""
Pydantic models for facilities.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FacilityBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=200, examples=["Head office"])
    address: Optional[str] = Field(None, max_length=300)
    city: Optional[str] = Field(None, max_length=100, examples=["Leeds"])
    state: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100, examples=["United Kingdom"])
    postal_code: Optional[str] = Field(None, max_length=20)
    facility_type: Optional[str] = Field(None, max_length=100, examples=["office"])
    description: Optional[str] = None


class FacilityCreate(FacilityBase):
    pass


class FacilityUpdate(BaseModel):
    """Partial facility update; only given fields change."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    address: Optional[str] = Field(None, max_length=300)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    postal_code: Optional[str] = Field(None, max_length=20)
    facility_type: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None


class FacilityPydModel(FacilityBase):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    organization_id: int
    created_at: datetime
    updated_at: datetime
