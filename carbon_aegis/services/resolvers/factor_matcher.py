"""
Database-backed emission factor matching.

Tries an exact match first, then the match without level3, then a fuzzy match
of level2 among the factors sharing level1 and the unit. A level2 that finds
no close row is never dropped, and the unit is never relaxed.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from rapidfuzz import fuzz, process
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_aegis.database.repositories import EmissionFactorRepository
from carbon_aegis.database.schemas import EmissionFactorDBModel
from carbon_aegis.pydantic_models.emission_factor import EmissionFactorLookup, FactorQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FactorMatch:
    factor: EmissionFactorDBModel
    confidence: Decimal
    method: str

    def to_lookup(self) -> EmissionFactorLookup:
        value = Decimal(self.factor.ghg_conversion_factor)
        return EmissionFactorLookup(
            conversion_factor=value,
            result=value,
            ghg_unit=self.factor.ghg_unit,
            confidence=self.confidence,
            match_method=self.method,
            factor_id=self.factor.id,
        )


class FactorMatcher:
    """
    Service for matching factor queries to rows of the factor table.

    Supports exact matching and fuzzy matching with confidence scoring.
    """

    DEFAULT_THRESHOLD = 80

    def __init__(
        self,
        session: AsyncSession,
        fuzzy_enabled: bool = True,
        threshold: int = DEFAULT_THRESHOLD,
    ):
        """
        Initialize factor matcher with database session.

        Args:
            session: Async SQLAlchemy session
            fuzzy_enabled: Whether to try a fuzzy match of level2
            threshold: Minimum rapidfuzz score (0-100) of a fuzzy match
        """
        self.session = session
        self.repo = EmissionFactorRepository(session)
        self.fuzzy_enabled = fuzzy_enabled
        self.threshold = threshold

    async def exact_match(self, query: FactorQuery) -> Optional[EmissionFactorDBModel]:
        """
        Find the factor matching every key of the query.
        """
        factor = await self.repo.find_first(
            level1=query.level1,
            level2=query.level2,
            level3=query.level3,
            uom=query.uom,
            scope=query.scope,
            category_id=query.category_id,
        )
        if factor:
            logger.debug(f"Exact match found for {query.as_params()}")
        else:
            logger.debug(f"No exact match for {query.as_params()}")
        return factor

    async def fuzzy_match(
        self, query: FactorQuery, threshold: Optional[int] = None
    ) -> Optional[tuple[EmissionFactorDBModel, Decimal]]:
        """
        Find the factor whose level2 is closest to the query's level2.

        Only factors sharing the query's level1 and unit are considered.

        Returns:
            Tuple of (factor, confidence) if a candidate scores above the threshold
        """
        threshold = self.threshold if threshold is None else threshold
        if not query.level2:
            return None

        factors = await self.repo.get_candidates(
            level1=query.level1,
            uom=query.uom,
            scope=query.scope,
            category_id=query.category_id,
        )
        choices = {factor.level2: factor for factor in reversed(factors) if factor.level2}
        if not choices:
            logger.debug(f"No fuzzy candidates for {query.as_params()}")
            return None

        # token_sort_ratio tolerates reordered words
        result = process.extractOne(query.level2, choices.keys(), scorer=fuzz.token_sort_ratio)
        if result is None:
            return None

        matched_level2, score, _ = result
        if score < threshold:
            logger.info(
                f"Fuzzy match score {score} below threshold {threshold} "
                f"for '{query.level2}' (best: '{matched_level2}')"
            )
            return None

        confidence = (Decimal(str(score)) / Decimal("100")).quantize(Decimal("0.0001"))
        logger.info(f"Fuzzy matched '{query.level2}' to '{matched_level2}' with {score}% confidence")
        return choices[matched_level2], confidence

    async def match_with_fallback(self, query: FactorQuery) -> Optional[FactorMatch]:
        """
        Match a query, relaxing it until a factor is found.

        Returns:
            FactorMatch, or None when no step finds a factor
        """
        if not query.level1 and not query.category_id:
            logger.warning("Factor query without level1 or category, nothing to match")
            return None

        factor = await self.exact_match(query)
        if factor:
            return FactorMatch(factor, Decimal("1.0"), "exact")

        if query.level3:
            factor = await self.exact_match(query.model_copy(update={"level3": None}))
            if factor:
                return FactorMatch(factor, Decimal("0.9"), "without_level3")

        if self.fuzzy_enabled:
            fuzzy = await self.fuzzy_match(query)
            if fuzzy:
                return FactorMatch(fuzzy[0], fuzzy[1], "fuzzy")

        logger.error(f"No match found (exact or fuzzy) for {query.as_params()}")
        return None

    async def lookup_factor(self, query: FactorQuery) -> Optional[EmissionFactorLookup]:
        """Factor lookup service interface: resolved lookup, or None when unmatched."""
        match = await self.match_with_fallback(query)
        return match.to_lookup() if match else None
