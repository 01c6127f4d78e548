"""
Pydantic models for the category/fuel taxonomy.
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Option(BaseModel):
    """Selectable value with its display label."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class EmissionCategoryDefinition(BaseModel):
    """One category of the entry form together with its fuel options."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    scope: str = Field(..., examples=["scope1"])
    category_id: str = Field(..., examples=["Fuels"])
    name: str = Field(..., examples=["Stationary Combustion - Fuel"])
    description: str = ""
    fuel_types: tuple[Option, ...] = ()
    fuel_sub_types: dict[str, tuple[Option, ...]] = Field(default_factory=dict)
    units: dict[str, tuple[Option, ...]] = Field(default_factory=dict)
    category_units: tuple[Option, ...] = Field(
        (), description="Units of categories without fuel types (scope 2)"
    )
