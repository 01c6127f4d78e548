"""
Application constants.
"""
from enum import Enum


class ConfigFile:
    """Configuration file names."""
    PRODUCTION = "production.toml"
    DEVELOPMENT = "development.toml"
    TEST = "test.toml"


class Scope:
    """GHG Protocol scope identifiers as stored on records."""
    SCOPE_1 = "scope1"
    SCOPE_2 = "scope2"
    SCOPE_3 = "scope3"


class ScopeEnum(str, Enum):
    """GHG Protocol scope enum for API parameters."""
    SCOPE_1 = "scope1"
    SCOPE_2 = "scope2"
    SCOPE_3 = "scope3"


class Category:
    """Emission category identifiers offered by the entry form."""
    FUELS = "Fuels"
    BIOENERGY = "Bioenergy"
    PASSENGER_VEHICLES = "Passenger vehicles"
    DELIVERY_VEHICLES = "Delivery vehicles"
    REFRIGERANT = "Refrigerant & other"
    UK_ELECTRICITY = "UK electricity"
    HEAT_AND_STEAM = "Heat and steam"


class UserRole(str, Enum):
    """Role of the acting user."""
    ORGANIZATION = "organization"
    CONSULTANT = "consultant"


# Client selector values that do not name a concrete organisation
NON_CONCRETE_CLIENTS = frozenset({"", "all", "none"})

# Delivery vehicle classes whose sub-type must be filled in
DELIVERY_SUBTYPE_REQUIRED_FUEL_TYPES = frozenset(
    {
        "Vans",
        "Heavy Goods Vehicles (HGVs) – Rigid",
        "HGV (all diesel)",
        "Refrigerated HGVs – Rigid",
        "Refrigerated HGVs – Articulated",
    }
)

# level2 sent for every delivery vehicle factor lookup
DELIVERY_VEHICLE_FACTOR_LEVEL2 = "HGV (all diesel)"

# Bucket for records without a recognised category
OTHER_CATEGORY = "Other"

# Period assumed for records saved without one
DEFAULT_REPORTING_PERIOD = "2024-01"

GHG_EMISSIONS_ENDPOINT = "/api/ghg-emissions"
FACILITIES_ENDPOINT = "/api/facilities"
EMISSION_FACTORS_ENDPOINT = "/api/emission-factors"
