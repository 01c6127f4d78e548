"""
Pydantic model for the in-progress emission entry form.
"""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Fields cleared whenever the category changes
DETAIL_FIELDS = (
    "fuel_type",
    "fuel_sub_type",
    "unit",
    "vehicle_fuel_type",
    "laden_weight",
    "country",
    "energy_type",
    "quantity",
)


class EmissionFormState(BaseModel):
    """
    Selections of one emission entry.

    Every field stays optional while the user is filling the form in; which of
    them are required depends on the category.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    scope: Optional[str] = Field(None, examples=["scope1"])
    category: Optional[str] = Field(None, examples=["Fuels"])
    fuel_type: Optional[str] = Field(None, examples=["Liquid fuels"])
    fuel_sub_type: Optional[str] = Field(None, examples=["Diesel (100% mineral diesel)"])
    unit: Optional[str] = Field(None, examples=["litres"])
    vehicle_fuel_type: Optional[str] = Field(None, examples=["diesel"])
    laden_weight: Optional[str] = Field(None, examples=["average-laden"])
    country: Optional[str] = Field(None, examples=["uk"])
    energy_type: Optional[str] = Field(None, examples=["district"])
    quantity: Optional[Decimal] = Field(None, examples=[Decimal("500")])

    def cleared_details(self) -> "EmissionFormState":
        """Copy with scope and category kept and every detail field reset."""
        return self.model_copy(update={field: None for field in DETAIL_FIELDS})
