"""
Emission factor resolver.

Turns form selections into a factor lookup and insists on a usable answer: an
unmatched lookup or a missing factor raises ``LookupNotFoundError`` instead of
falling back to a zero factor.
"""
import logging
from decimal import Decimal
from typing import Optional, Protocol

from carbon_aegis.pydantic_models.emission_factor import EmissionFactorLookup, FactorQuery
from carbon_aegis.pydantic_models.emission_form import EmissionFormState
from carbon_aegis.services.exceptions import LookupNotFoundError
from carbon_aegis.services.resolvers.factor_query import build_factor_query

logger = logging.getLogger(__name__)


class FactorLookupService(Protocol):
    """Anything that can look up a factor: the database matcher or the HTTP client."""

    async def lookup_factor(self, query: FactorQuery) -> Optional[EmissionFactorLookup]:
        ...


class EmissionFactorResolver:
    def __init__(self, lookup_service: FactorLookupService):
        self.lookup_service = lookup_service

    async def resolve(self, query: FactorQuery) -> EmissionFactorLookup:
        """
        Resolve a prepared query.

        Raises:
            LookupNotFoundError: No factor matched, or the match has no usable value
            NetworkError: The lookup service could not be reached
        """
        lookup = await self.lookup_service.lookup_factor(query)
        if lookup is None:
            logger.warning(f"No emission factor for {query.as_params()}")
            raise LookupNotFoundError(query)

        factor = lookup.conversion_factor
        if not isinstance(factor, Decimal) or not factor.is_finite():
            logger.error(f"Unusable conversion factor {factor!r} for {query.as_params()}")
            raise LookupNotFoundError(query, message="Matching factor has no usable value")

        return lookup

    async def resolve_factor(
        self,
        scope: Optional[str],
        category_id: Optional[str],
        level1: Optional[str] = None,
        level2: Optional[str] = None,
        uom: Optional[str] = None,
    ) -> EmissionFactorLookup:
        query = FactorQuery(
            scope=scope, category_id=category_id, level1=level1, level2=level2, uom=uom
        )
        return await self.resolve(query)

    async def resolve_for_form(
        self, scope: Optional[str], category: Optional[str], form_state: EmissionFormState
    ) -> EmissionFactorLookup:
        """Resolve the factor for a filled-in entry form."""
        return await self.resolve(build_factor_query(scope, category, form_state))
