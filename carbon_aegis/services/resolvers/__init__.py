from carbon_aegis.services.resolvers.emission_factor_resolver import (
    EmissionFactorResolver,
    FactorLookupService,
)
from carbon_aegis.services.resolvers.factor_matcher import FactorMatch, FactorMatcher
from carbon_aegis.services.resolvers.factor_query import build_factor_query

__all__ = [
    "EmissionFactorResolver",
    "FactorLookupService",
    "FactorMatch",
    "FactorMatcher",
    "build_factor_query",
]
