"""
SQLAlchemy database models (schemas).
"""
from carbon_aegis.database.schemas.emission_factor import EmissionFactorDBModel
from carbon_aegis.database.schemas.facility import FacilityDBModel
from carbon_aegis.database.schemas.ghg_emission import GhgEmissionDBModel

__all__ = [
    "EmissionFactorDBModel",
    "FacilityDBModel",
    "GhgEmissionDBModel",
]
