"""
Caller context for requests and workflows.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from carbon_aegis.utils.constants import UserRole


class CallerContext(BaseModel):
    """Who is acting, in which role, for which organisation."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field("anonymous", description="Identifier of the acting user")
    role: UserRole = Field(UserRole.ORGANIZATION, description="organization or consultant")
    organization_id: Optional[int] = Field(
        None, description="Organisation the user belongs to"
    )

    @property
    def is_consultant(self) -> bool:
        return self.role == UserRole.CONSULTANT
