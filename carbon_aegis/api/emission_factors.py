"""
Emission Factors API router.

Factor lookup for the entry form (JSON body or query string) and a paginated
listing of the factor table.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_aegis.core.config import Config
from carbon_aegis.core.dependencies import get_app_config, get_db_session
from carbon_aegis.database.repositories import EmissionFactorRepository
from carbon_aegis.pydantic_models.emission_factor import (
    EmissionFactorLookup,
    EmissionFactorPydModel,
    FactorQuery,
)
from carbon_aegis.services.resolvers import EmissionFactorResolver, FactorMatcher

router = APIRouter(
    prefix="/api/emission-factors",
    tags=["Emission Factors"],
)

logger = logging.getLogger(__name__)


def get_factor_resolver(
    session: AsyncSession = Depends(get_db_session),
    config: Config = Depends(get_app_config),
) -> EmissionFactorResolver:
    settings = config.section("emission_factors")
    matcher = FactorMatcher(
        session,
        fuzzy_enabled=settings.get("fuzzy_match_enabled", True),
        threshold=int(settings.get("fuzzy_match_threshold", FactorMatcher.DEFAULT_THRESHOLD)),
    )
    return EmissionFactorResolver(matcher)


@router.post("", response_model=EmissionFactorLookup)
async def lookup_emission_factor(
    query: FactorQuery,
    resolver: EmissionFactorResolver = Depends(get_factor_resolver),
):
    """
    Look up the conversion factor for the posted levels.

    Responds 404 {"error": "Matching factor not found"} when nothing matches.
    """
    if not query.level1 and not query.category_id:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="level1 or categoryId is required",
        )
    return await resolver.resolve(query)


@router.get("", response_model=EmissionFactorLookup)
async def lookup_emission_factor_by_params(
    scope: str | None = None,
    category_id: str | None = Query(None, alias="categoryId"),
    level1: str | None = None,
    level2: str | None = None,
    level3: str | None = None,
    uom: str | None = None,
    resolver: EmissionFactorResolver = Depends(get_factor_resolver),
):
    """
    Same lookup as the POST variant with the levels in the query string.
    """
    query = FactorQuery(
        scope=scope, category_id=category_id, level1=level1, level2=level2, level3=level3, uom=uom
    )
    return await lookup_emission_factor(query, resolver)


@router.get("/list", response_model=list[EmissionFactorPydModel])
async def list_emission_factors(
    skip: int = 0,
    limit: int = Query(100, le=1000),
    scope: str | None = None,
    category_id: str | None = Query(None, alias="categoryId"),
    session: AsyncSession = Depends(get_db_session),
):
    """
    List emission factors with pagination and optional filtering.

    Args:
        skip: Number of records to skip
        limit: Maximum number of records to return
        scope: Filter by GHG scope (optional)
        category_id: Filter by emission category (optional)
    """
    repo = EmissionFactorRepository(session)
    return await repo.list_factors(scope=scope, category_id=category_id, skip=skip, limit=limit)


@router.get("/{factor_id}", response_model=EmissionFactorPydModel)
async def get_emission_factor(
    factor_id: int,
    session: AsyncSession = Depends(get_db_session),
):
    """
    Get emission factor by ID.
    """
    repo = EmissionFactorRepository(session)
    factor = await repo.get_by_id(factor_id)

    if not factor:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Emission factor {factor_id} not found",
        )

    return factor
