"""
GHG Emissions API router.

Saved emission entries of an organisation, server-side calculation of a
filled-in entry form and the dashboard summary.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_aegis.api.emission_factors import get_factor_resolver
from carbon_aegis.core.config import Config
from carbon_aegis.core.dependencies import get_app_config, get_current_user, get_db_session
from carbon_aegis.database.repositories import GhgEmissionRepository
from carbon_aegis.pydantic_models.caller import CallerContext
from carbon_aegis.pydantic_models.emission_summary import EmissionsOverview
from carbon_aegis.pydantic_models.ghg_emission import (
    EmissionCalculateRequest,
    GhgEmissionCreate,
    GhgEmissionPydModel,
)
from carbon_aegis.services import taxonomy
from carbon_aegis.services.aggregators import EmissionAggregator
from carbon_aegis.services.builders import build_record
from carbon_aegis.services.exceptions import FormValidationError
from carbon_aegis.services.resolvers import EmissionFactorResolver
from carbon_aegis.services.validation import get_validation_schema

router = APIRouter(
    prefix="/api/ghg-emissions",
    tags=["GHG Emissions"],
)

organizations_router = APIRouter(
    prefix="/api/organizations",
    tags=["GHG Emissions"],
)

logger = logging.getLogger(__name__)


def resolve_organization_id(requested: Optional[int], user: CallerContext) -> int:
    """Organisation a request acts on: the requested one, else the caller's own."""
    organization_id = requested if requested is not None else user.organization_id
    if organization_id is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No organization found for the caller",
        )
    return organization_id


async def _save_emission(
    session: AsyncSession, emission: GhgEmissionCreate, organization_id: int
) -> GhgEmissionPydModel:
    repo = GhgEmissionRepository(session)
    data = emission.model_dump(mode="json", exclude={"organization_id"})
    created = await repo.create(**data, organization_id=organization_id)
    logger.info(
        f"Saved {created.scope} emission {created.id} ({created.category}) "
        f"for organization {organization_id}"
    )
    return GhgEmissionPydModel.model_validate(created)


@router.get("", response_model=List[GhgEmissionPydModel])
async def list_emissions(
    organization_id: Optional[int] = Query(None, alias="organizationId"),
    user: CallerContext = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """
    List the emission entries of an organisation.

    Args:
        organization_id: Organisation to list, defaults to the caller's own
    """
    organization_id = resolve_organization_id(organization_id, user)
    repo = GhgEmissionRepository(session)
    return await repo.get_by_organization(organization_id)


@router.post(
    "",
    response_model=GhgEmissionPydModel,
    status_code=status.HTTP_201_CREATED,
)
async def create_emission(
    emission: GhgEmissionCreate,
    user: CallerContext = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Save an emission entry.

    The entry goes to ``organizationId`` when given, else to the caller's
    organisation.
    """
    organization_id = resolve_organization_id(emission.organization_id, user)
    return await _save_emission(session, emission, organization_id)


@router.post(
    "/calculate",
    response_model=GhgEmissionPydModel,
    status_code=status.HTTP_201_CREATED,
)
async def calculate_emission(
    request: EmissionCalculateRequest,
    user: CallerContext = Depends(get_current_user),
    resolver: EmissionFactorResolver = Depends(get_factor_resolver),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Validate a filled-in entry form, resolve its factor and save the result.

    Responds 422 with per-field messages when the form is incomplete and 404
    when no factor matches.
    """
    if not taxonomy.category_belongs_to_scope(request.category, request.scope):
        raise FormValidationError(
            {"category": "Please select scope and category first"}, category=request.category
        )

    field_errors = get_validation_schema(request.category).validate(request)
    if field_errors:
        raise FormValidationError(field_errors, category=request.category)

    lookup = await resolver.resolve_for_form(request.scope, request.category, request)
    record = build_record(request, lookup, reporting_period=request.reporting_period)

    organization_id = resolve_organization_id(request.organization_id, user)
    logger.debug(
        f"Calculated {record.co2_equivalent} {lookup.ghg_unit or 'kg CO2e'} "
        f"via {lookup.match_method} match (confidence {lookup.confidence})"
    )
    return await _save_emission(session, record, organization_id)


@router.get("/summary", response_model=EmissionsOverview)
async def emissions_summary(
    organization_id: Optional[int] = Query(None, alias="organizationId"),
    user: CallerContext = Depends(get_current_user),
    config: Config = Depends(get_app_config),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Dashboard overview: totals per scope, month and category.
    """
    organization_id = resolve_organization_id(organization_id, user)
    limit = int(config.section("reporting").get("top_areas_limit", 3))
    aggregator = EmissionAggregator(session, top_areas_limit=limit)
    return await aggregator.organization_overview(organization_id)


@organizations_router.get(
    "/{organization_id}/ghg-emissions", response_model=List[GhgEmissionPydModel]
)
async def list_organization_emissions(
    organization_id: int,
    session: AsyncSession = Depends(get_db_session),
):
    repo = GhgEmissionRepository(session)
    return await repo.get_by_organization(organization_id)


@organizations_router.post(
    "/{organization_id}/ghg-emissions",
    response_model=GhgEmissionPydModel,
    status_code=status.HTTP_201_CREATED,
)
async def create_organization_emission(
    organization_id: int,
    emission: GhgEmissionCreate,
    session: AsyncSession = Depends(get_db_session),
):
    """Save an entry for the organisation in the path; a body organizationId is ignored."""
    return await _save_emission(session, emission, organization_id)
