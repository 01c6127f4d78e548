"""
Repository for Facility database operations.
"""
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_aegis.database.repositories.base import BaseRepository
from carbon_aegis.database.schemas import FacilityDBModel


class FacilityRepository(BaseRepository[FacilityDBModel]):
    """Repository for organisation facilities."""

    def __init__(self, session: AsyncSession):
        super().__init__(FacilityDBModel, session)

    async def get_by_organization(self, organization_id: int) -> List[FacilityDBModel]:
        stmt = (
            select(self.model)
            .where(self.model.organization_id == organization_id)
            .order_by(self.model.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
