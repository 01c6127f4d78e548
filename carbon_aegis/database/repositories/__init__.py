"""
Database repositories for data access layer.

Provides clean abstraction over database operations following repository pattern.
"""
from carbon_aegis.database.repositories.base import BaseRepository
from carbon_aegis.database.repositories.emission_factor import EmissionFactorRepository
from carbon_aegis.database.repositories.facility import FacilityRepository
from carbon_aegis.database.repositories.ghg_emission import GhgEmissionRepository

__all__ = [
    "BaseRepository",
    "EmissionFactorRepository",
    "FacilityRepository",
    "GhgEmissionRepository",
]
