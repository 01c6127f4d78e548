"""
Emission taxonomy API router.

Serves the scope, category and fuel options the entry form is rendered from.
"""
from fastapi import APIRouter

from carbon_aegis.services import taxonomy

router = APIRouter(
    prefix="/api/emission-taxonomy",
    tags=["Emission Taxonomy"],
)


@router.get("")
async def get_emission_taxonomy():
    """
    Categories per scope with their fuel types, plus the shared option lists.
    """
    return taxonomy.as_dict()


@router.get("/fuel-types/{fuel_type}")
async def get_fuel_type_options(fuel_type: str):
    """Sub-types and units offered for one fuel type."""
    return {
        "fuelType": fuel_type,
        "fuelSubTypes": [option.model_dump() for option in taxonomy.get_fuel_sub_types(fuel_type)],
        "units": [option.model_dump() for option in taxonomy.get_units(fuel_type)],
    }
