"""
Category/fuel taxonomy of the emission entry form.

Static reference data: scope -> category -> fuel type -> fuel sub-type and
permitted units. Values are the ones stored on records and sent to the factor
lookup; labels are for display only.
"""
from typing import Optional

from carbon_aegis.pydantic_models.taxonomy import EmissionCategoryDefinition, Option
from carbon_aegis.utils.constants import Category, Scope


def _opts(*values: str | tuple[str, str]) -> tuple[Option, ...]:
    """Options from bare values (label == value) or (value, label) pairs."""
    options = []
    for item in values:
        value, label = item if isinstance(item, tuple) else (item, item)
        options.append(Option(value=value, label=label))
    return tuple(options)


DISTANCE_UNITS = _opts("km", "miles")
STATIONARY_UNITS = _opts("tonnes", "kWh (Net CV)", "kWh (Gross CV)")

FUEL_TYPES: dict[str, tuple[Option, ...]] = {
    Category.FUELS: _opts(
        ("Gaseous fuels", "Gaseous Fuels"),
        ("Liquid fuels", "Liquid Fuels"),
        ("Solid fuels", "Solid Fuels"),
    ),
    Category.BIOENERGY: _opts("Biofuel", "Biomass", "Biogas"),
    Category.PASSENGER_VEHICLES: _opts(
        "Cars (by market segment)", "Cars (by size)", "Motorbike"
    ),
    Category.DELIVERY_VEHICLES: _opts(
        "Vans",
        "Heavy Goods Vehicles (HGVs) – Rigid",
        ("HGV (all diesel)", "Heavy Goods Vehicles (HGVs) – Articulated"),
        "Refrigerated HGVs – Rigid",
        "Refrigerated HGVs – Articulated",
        "All Vans (Average)",
        "All HGVs (Average)",
        ("HGVs refrigerated (all diesel)", "All refrigerated HGVs (Average)"),
    ),
    Category.REFRIGERANT: _opts(("refrigerant", "Refrigerant")),
}

FUEL_SUB_TYPES: dict[str, tuple[Option, ...]] = {
    "Gaseous fuels": _opts(
        "Butane",
        "CNG",
        "LNG",
        "LPG",
        "Natural gas",
        "Natural gas (100% mineral blend)",
        "Other petroleum gas",
        "Propane",
    ),
    "Liquid fuels": _opts(
        "Aviation spirit",
        "Aviation turbine fuel",
        "Burning oil",
        "Diesel (average biofuel blend)",
        "Diesel (100% mineral diesel)",
        "Fuel oil",
        "Gas oil",
        "Lubricants",
        "Naphtha",
        "Petrol (average biofuel blend)",
        "Petrol (100% mineral petrol)",
        "Processed fuel oils - residual oil",
        "Processed fuel oils - distillate oil",
        ("refinery-misc", "Refinery miscellaneous"),
        "Waste oils",
        "Marine gas oil",
        "Marine fuel oil",
    ),
    "Solid fuels": _opts(
        "Coal (industrial)",
        "Coal (electricity generation)",
        "Coal (domestic)",
        "Coking coal",
        "Petroleum coke",
        "Coal (electricity generation - home produced coal only)",
    ),
    "Biofuel": _opts(
        "Bioethanol",
        "Biodiesel ME",
        "Biodiesel ME (from used cooking oil)",
        "Biodiesel ME (from tallow)",
        "Biodiesel HVO",
        "Biopropane",
        "Development diesel",
        "Development petrol",
        "Off road biodiesel",
        "Biomethane (compressed)",
        "Biomethane (liquified)",
        "Methanol (bio)",
        "Avtur (renewable)",
    ),
    "Biomass": _opts("Wood logs", "Wood chips", "Wood pellets", "Grass/straw"),
    "Biogas": _opts("Biogas", "Landfill gas"),
    "Cars (by market segment)": _opts(
        "Mini",
        "Supermini",
        "Lower medium",
        "Upper medium",
        "Executive",
        "Luxury",
        "Sports",
        "Dual purpose 4X4",
        "MPV",
    ),
    "Cars (by size)": _opts("Small car", "Medium car", "Large car", "Average car"),
    "Motorbike": _opts("Small", "Medium", "Large", "Average"),
    "Vans": _opts(
        "Class I (up to 1.305 tonnes)",
        "Class II (1.305 to 1.74 tonnes)",
        "Class III (1.74 to 3.5 tonnes)",
        "Average (up to 3.5 tonnes)",
    ),
    "Heavy Goods Vehicles (HGVs) – Rigid": _opts(
        ("Rigid (>3.5 - 7.5 tonnes)", "3.5 – 7.5 tonnes"),
        "7.5 – 17 tonnes",
        "17 tonnes",
        "All rigids (Average)",
    ),
    "HGV (all diesel)": _opts("3.5 – 33 tonnes", "33 tonnes", "All artics (Average)"),
    "Refrigerated HGVs – Rigid": _opts(
        "3.5 – 7.5 tonnes", "7.5 – 17 tonnes", "17 tonnes", "All rigids (Average)"
    ),
    "Refrigerated HGVs – Articulated": _opts(
        "3.5 – 33 tonnes", "33 tonnes", "All artics (Average)"
    ),
    "All Vans (Average)": (),
    "All HGVs (Average)": (),
    "HGVs refrigerated (all diesel)": (),
    "refrigerant": _opts(
        "Carbon dioxide",
        "Methane",
        "Nitrous oxide",
        "HFC-23",
        "HFC-32",
        "HFC-41",
        "HFC-125",
        "HFC-134",
        "HFC-134a",
        "HFC-143",
        "HFC-143a",
        "HFC-152a",
        "HFC-227ea",
        "HFC-236fa",
        "HFC-245fa",
        "HFC-43-I0mee",
        "Perfluoromethane (PFC-14)",
        "Perfluoroethane (PFC-116)",
        "Perfluoropropane (PFC-218)",
        "Perfluorocyclobutane (PFC-318)",
        "Perfluorobutane (PFC-3-1-10)",
        "Perfluoropentane (PFC-4-1-12)",
        "Perfluorohexane (PFC-5-1-14)",
        "PFC-9-1-18",
        "Perfluorocyclopropane",
        "Sulphur hexafluoride (SF6)",
        "HFC-152",
        "HFC-161",
        "HFC-236cb",
        "HFC-236ea",
        "HFC-245ca",
    ),
}

UNITS: dict[str, tuple[Option, ...]] = {
    "Gaseous fuels": STATIONARY_UNITS,
    "Liquid fuels": STATIONARY_UNITS + _opts("litres"),
    "Solid fuels": STATIONARY_UNITS,
    "Biofuel": _opts("litres", "GJ", "kg"),
    "Biomass": _opts("tonnes", "kWh"),
    "Biogas": _opts("tonnes", "kWh"),
    "Cars (by market segment)": DISTANCE_UNITS,
    "Cars (by size)": DISTANCE_UNITS,
    "Motorbike": DISTANCE_UNITS,
    "Vans": DISTANCE_UNITS,
    "Heavy Goods Vehicles (HGVs) – Rigid": DISTANCE_UNITS,
    "HGV (all diesel)": DISTANCE_UNITS,
    "Refrigerated HGVs – Rigid": DISTANCE_UNITS,
    "Refrigerated HGVs – Articulated": DISTANCE_UNITS,
    "All Vans (Average)": DISTANCE_UNITS,
    "All HGVs (Average)": DISTANCE_UNITS,
    "HGVs refrigerated (all diesel)": DISTANCE_UNITS,
    "refrigerant": _opts("kg"),
}

# Units of categories that have no fuel types
CATEGORY_UNITS: dict[str, tuple[Option, ...]] = {
    Category.UK_ELECTRICITY: _opts("kWh"),
    Category.HEAT_AND_STEAM: _opts("kWh"),
}

VEHICLE_FUEL_TYPES = _opts(
    ("diesel", "Diesel"),
    ("petrol", "Petrol"),
    ("hybrid", "Hybrid"),
    ("phev", "Plug-in Hybrid Electric Vehicle"),
    ("bev", "Battery Electric Vehicle"),
    ("unknown", "Unknown"),
    "CNG",
    "LPG",
)

VAN_FUEL_TYPES = _opts(
    ("diesel", "Diesel"),
    ("petrol", "Petrol"),
    ("phev", "Plug-in Hybrid Electric Vehicle"),
    ("bev", "Battery Electric Vehicle"),
    ("hybrid", "Hybrid"),
    "CNG",
    "LPG",
    ("unknown", "Unknown"),
)

LADEN_WEIGHT_OPTIONS = _opts(
    ("0-laden", "0% Laden"),
    ("50-laden", "50% Laden"),
    ("100-laden", "100% Laden"),
    ("average-laden", "Average laden"),
)

COUNTRY_OPTIONS = _opts(
    ("uk", "United Kingdom"),
    ("us", "United States"),
    ("ca", "Canada"),
    ("au", "Australia"),
    ("de", "Germany"),
    ("fr", "France"),
    ("it", "Italy"),
    ("es", "Spain"),
    ("nl", "Netherlands"),
    ("se", "Sweden"),
    ("no", "Norway"),
    ("dk", "Denmark"),
    ("fi", "Finland"),
    ("jp", "Japan"),
    ("kr", "South Korea"),
    ("cn", "China"),
    ("in", "India"),
    ("br", "Brazil"),
    ("mx", "Mexico"),
    ("za", "South Africa"),
)

ENERGY_TYPE_OPTIONS = _opts(
    ("onsite", "Onsite heat and steam"),
    ("district", "District heat and steam"),
)

_CATEGORY_HEADERS = {
    Scope.SCOPE_1: (
        (Category.FUELS, "Stationary Combustion - Fuel", "Fuel combustion in stationary equipment"),
        (Category.BIOENERGY, "Stationary Combustion - Bioenergy", "Bioenergy combustion in stationary equipment"),
        (Category.PASSENGER_VEHICLES, "Mobile Combustion - Passenger Vehicles", "Passenger vehicle fuel combustion"),
        (Category.DELIVERY_VEHICLES, "Mobile Combustion - Delivery Vehicles", "Delivery vehicle fuel combustion"),
        (Category.REFRIGERANT, "Fugitive Emissions - Refrigerants", "Refrigerant emissions and leaks"),
    ),
    Scope.SCOPE_2: (
        (Category.UK_ELECTRICITY, "Purchased Electricity", "Electricity purchased from grid"),
        (Category.HEAT_AND_STEAM, "Purchased Heat & Steam", "Heat and steam purchased from external sources"),
    ),
}


def _build_categories() -> dict[str, EmissionCategoryDefinition]:
    categories = {}
    for scope, headers in _CATEGORY_HEADERS.items():
        for category_id, name, description in headers:
            fuel_types = FUEL_TYPES.get(category_id, ())
            categories[category_id] = EmissionCategoryDefinition(
                scope=scope,
                category_id=category_id,
                name=name,
                description=description,
                fuel_types=fuel_types,
                fuel_sub_types={
                    option.value: FUEL_SUB_TYPES[option.value]
                    for option in fuel_types
                    if option.value in FUEL_SUB_TYPES
                },
                units={
                    option.value: UNITS[option.value]
                    for option in fuel_types
                    if option.value in UNITS
                },
                category_units=CATEGORY_UNITS.get(category_id, ()),
            )
    return categories


CATEGORIES: dict[str, EmissionCategoryDefinition] = _build_categories()

SELECTABLE_SCOPES = tuple(_CATEGORY_HEADERS)


def get_scope_categories(scope: Optional[str]) -> list[EmissionCategoryDefinition]:
    """Categories offered under a scope, in display order."""
    return [category for category in CATEGORIES.values() if category.scope == scope]


def get_category(category_id: Optional[str]) -> Optional[EmissionCategoryDefinition]:
    if not category_id:
        return None
    return CATEGORIES.get(category_id)


def is_known_category(category_id: Optional[str]) -> bool:
    return get_category(category_id) is not None


def category_belongs_to_scope(category_id: Optional[str], scope: Optional[str]) -> bool:
    category = get_category(category_id)
    return category is not None and category.scope == scope


def get_fuel_types(category_id: Optional[str]) -> tuple[Option, ...]:
    category = get_category(category_id)
    return category.fuel_types if category else ()


def get_fuel_sub_types(fuel_type: Optional[str]) -> tuple[Option, ...]:
    return FUEL_SUB_TYPES.get(fuel_type or "", ())


def get_units(fuel_type: Optional[str]) -> tuple[Option, ...]:
    return UNITS.get(fuel_type or "", ())


def get_category_units(category_id: Optional[str]) -> tuple[Option, ...]:
    """Units of a category that is measured without choosing a fuel type."""
    return CATEGORY_UNITS.get(category_id or "", ())


def check_taxonomy_integrity() -> list[str]:
    """
    List the fuel types that would be dead-end selections.

    Every fuel type offered by a category must have an entry, possibly empty,
    in both the sub-type and the unit mapping, and every category must offer
    either fuel types or category units.

    Returns:
        Human readable problems; empty when the taxonomy is consistent
    """
    problems = []
    for category in CATEGORIES.values():
        if not category.fuel_types and not category.category_units:
            problems.append(f"{category.category_id}: no fuel types and no units")
        for option in category.fuel_types:
            if option.value not in FUEL_SUB_TYPES:
                problems.append(f"{category.category_id}/{option.value}: missing sub-type list")
            if option.value not in UNITS:
                problems.append(f"{category.category_id}/{option.value}: missing unit list")
    return problems


def as_dict() -> dict:
    """Taxonomy in the shape the entry form renders it."""
    return {
        "scopes": {
            scope: [category.model_dump(by_alias=True) for category in get_scope_categories(scope)]
            for scope in SELECTABLE_SCOPES
        },
        "vehicleFuelTypes": [option.model_dump() for option in VEHICLE_FUEL_TYPES],
        "vanFuelTypes": [option.model_dump() for option in VAN_FUEL_TYPES],
        "ladenWeightOptions": [option.model_dump() for option in LADEN_WEIGHT_OPTIONS],
        "countryOptions": [option.model_dump() for option in COUNTRY_OPTIONS],
        "energyTypeOptions": [option.model_dump() for option in ENERGY_TYPE_OPTIONS],
    }
