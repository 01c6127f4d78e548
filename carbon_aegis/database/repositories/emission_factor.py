"""
Repository for EmissionFactor database operations.
"""
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_aegis.database.repositories.base import BaseRepository
from carbon_aegis.database.schemas import EmissionFactorDBModel


class EmissionFactorRepository(BaseRepository[EmissionFactorDBModel]):
    """Repository for emission factor operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(EmissionFactorDBModel, session)

    def _by_level1(self, level1: Optional[str]):
        stmt = select(self.model)
        if level1:
            stmt = stmt.where(self.model.level1 == level1)
        return stmt

    def _scoped(self, stmt, scope: Optional[str], category_id: Optional[str]):
        # A factor row without scope/category applies to every scope/category
        if scope:
            stmt = stmt.where(or_(self.model.scope.is_(None), self.model.scope == scope))
        if category_id:
            stmt = stmt.where(
                or_(self.model.category_id.is_(None), self.model.category_id == category_id)
            )
        return stmt

    async def find_first(
        self,
        level1: Optional[str] = None,
        level2: Optional[str] = None,
        level3: Optional[str] = None,
        uom: Optional[str] = None,
        scope: Optional[str] = None,
        category_id: Optional[str] = None,
    ) -> Optional[EmissionFactorDBModel]:
        """
        Find the first factor whose columns equal every non-empty argument.

        Returns:
            Matching factor, lowest ID first, or None
        """
        stmt = self._by_level1(level1)
        if level2:
            stmt = stmt.where(self.model.level2 == level2)
        if level3:
            stmt = stmt.where(self.model.level3 == level3)
        if uom:
            stmt = stmt.where(self.model.uom == uom)
        stmt = self._scoped(stmt, scope, category_id).order_by(self.model.id).limit(1)

        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_candidates(
        self,
        level1: Optional[str] = None,
        uom: Optional[str] = None,
        scope: Optional[str] = None,
        category_id: Optional[str] = None,
    ) -> List[EmissionFactorDBModel]:
        """
        Get every factor under a level1 (and unit, when given).
        """
        stmt = self._by_level1(level1)
        if uom:
            stmt = stmt.where(self.model.uom == uom)
        stmt = self._scoped(stmt, scope, category_id).order_by(self.model.id)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_factors(
        self,
        scope: Optional[str] = None,
        category_id: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[EmissionFactorDBModel]:
        """
        List factors filtered by exact scope and category.
        """
        filters = {}
        if scope:
            filters["scope"] = scope
        if category_id:
            filters["category_id"] = category_id
        return await self.get_all(skip=skip, limit=limit, filters=filters)
