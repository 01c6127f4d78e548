"""
Facilities API router.

Facilities belong to an organisation; the caller only sees and changes the
ones of their own organisation.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_aegis.api.ghg_emissions import resolve_organization_id
from carbon_aegis.core.dependencies import get_current_user, get_db_session
from carbon_aegis.database.repositories import FacilityRepository
from carbon_aegis.database.schemas import FacilityDBModel
from carbon_aegis.pydantic_models.caller import CallerContext
from carbon_aegis.pydantic_models.facility import FacilityCreate, FacilityPydModel, FacilityUpdate

router = APIRouter(
    prefix="/api/facilities",
    tags=["Facilities"],
)

logger = logging.getLogger(__name__)


async def _get_owned_facility(
    repo: FacilityRepository, facility_id: int, organization_id: int
) -> FacilityDBModel:
    facility = await repo.get_by_id(facility_id)
    if facility is None or facility.organization_id != organization_id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Facility {facility_id} not found",
        )
    return facility


@router.get("", response_model=List[FacilityPydModel])
async def list_facilities(
    user: CallerContext = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    organization_id = resolve_organization_id(None, user)
    repo = FacilityRepository(session)
    return await repo.get_by_organization(organization_id)


@router.post("", response_model=FacilityPydModel, status_code=status.HTTP_201_CREATED)
async def create_facility(
    facility: FacilityCreate,
    user: CallerContext = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Create a facility for the caller's organisation.
    """
    organization_id = resolve_organization_id(None, user)
    repo = FacilityRepository(session)
    created = await repo.create(**facility.model_dump(), organization_id=organization_id)
    logger.info(f"Created facility {created.id} '{created.name}' for organization {organization_id}")
    return created


@router.put("/{facility_id}", response_model=FacilityPydModel)
async def update_facility(
    facility_id: int,
    facility: FacilityUpdate,
    user: CallerContext = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """
    Update the given fields of a facility.
    """
    organization_id = resolve_organization_id(None, user)
    repo = FacilityRepository(session)
    await _get_owned_facility(repo, facility_id, organization_id)
    return await repo.update(facility_id, **facility.model_dump(exclude_unset=True))


@router.delete("/{facility_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_facility(
    facility_id: int,
    user: CallerContext = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    organization_id = resolve_organization_id(None, user)
    repo = FacilityRepository(session)
    await _get_owned_facility(repo, facility_id, organization_id)
    await repo.delete(facility_id)
    logger.info(f"Deleted facility {facility_id} of organization {organization_id}")
