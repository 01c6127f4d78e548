"""
API routers module.
"""
from carbon_aegis.api.emission_factors import router as emission_factors_router
from carbon_aegis.api.facilities import router as facilities_router
from carbon_aegis.api.ghg_emissions import organizations_router
from carbon_aegis.api.ghg_emissions import router as ghg_emissions_router
from carbon_aegis.api.system import router as system_router
from carbon_aegis.api.taxonomy import router as taxonomy_router

__all__ = [
    "emission_factors_router",
    "facilities_router",
    "ghg_emissions_router",
    "organizations_router",
    "system_router",
    "taxonomy_router",
]
