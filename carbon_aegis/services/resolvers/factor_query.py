"""
Mapping of entry form selections onto factor lookup parameters.
"""
from typing import Optional

from carbon_aegis.pydantic_models.emission_factor import FactorQuery
from carbon_aegis.pydantic_models.emission_form import EmissionFormState
from carbon_aegis.utils.constants import Category, DELIVERY_VEHICLE_FACTOR_LEVEL2


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def build_factor_query(
    scope: Optional[str], category: Optional[str], form_state: EmissionFormState
) -> FactorQuery:
    """
    Build the factor lookup for a form.

    level1 is the fuel type, level2 the fuel sub-type and uom the unit, except:
    Passenger vehicles use the vehicle fuel type as level1 when one is chosen,
    Heat and steam uses the energy type as level1, and every Delivery vehicles
    lookup sends "HGV (all diesel)" as level2.
    """
    level1 = _clean(form_state.fuel_type)
    level2 = _clean(form_state.fuel_sub_type)

    if category == Category.PASSENGER_VEHICLES:
        level1 = _clean(form_state.vehicle_fuel_type) or level1
    elif category == Category.HEAT_AND_STEAM:
        level1 = _clean(form_state.energy_type)
    elif category == Category.DELIVERY_VEHICLES:
        level2 = DELIVERY_VEHICLE_FACTOR_LEVEL2

    return FactorQuery(
        scope=_clean(scope),
        category_id=_clean(category),
        level1=level1,
        level2=level2,
        uom=_clean(form_state.unit),
    )
