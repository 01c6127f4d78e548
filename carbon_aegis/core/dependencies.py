"""
FastAPI dependencies shared by the routers.
"""
import logging
from typing import AsyncIterator

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from carbon_aegis.core.config import Config
from carbon_aegis.database.session_manager.db_session import Database
from carbon_aegis.pydantic_models.caller import CallerContext
from carbon_aegis.utils.constants import UserRole

logger = logging.getLogger(__name__)


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """Yield a session that commits when the request handler succeeds."""
    async with Database() as session:
        yield session


def get_app_config(request: Request) -> Config:
    return request.app.state.config


async def get_current_user(
    config: Config = Depends(get_app_config),
    x_user_id: str | None = Header(None),
    x_user_role: UserRole = Header(UserRole.ORGANIZATION),
    x_organization_id: int | None = Header(None),
) -> CallerContext:
    """
    Build the caller context from request headers.

    Authentication happens upstream; the headers only say who the caller is and
    which organisation they belong to. Without an organisation header the
    configured default organisation is used.
    """
    organization_id = x_organization_id
    if organization_id is None:
        organization_id = config.section("tenancy").get("default_organization_id")
        logger.debug(f"No X-Organization-Id header, using default organization {organization_id}")

    return CallerContext(
        user_id=x_user_id or "anonymous",
        role=x_user_role,
        organization_id=organization_id,
    )
