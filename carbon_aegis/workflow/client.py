"""
Async HTTP client for the Carbon Aegis REST API.

Wraps an ``httpx.AsyncClient`` and turns transport failures and unexpected
statuses into ``NetworkError``. A 404 from the factor endpoint means "no
matching factor" and is returned as None.
"""
import logging
from typing import Any, Literal, Optional

import httpx

from carbon_aegis.pydantic_models.caller import CallerContext
from carbon_aegis.pydantic_models.emission_factor import EmissionFactorLookup, FactorQuery
from carbon_aegis.pydantic_models.emission_summary import EmissionsOverview
from carbon_aegis.pydantic_models.ghg_emission import GhgEmissionCreate
from carbon_aegis.services.exceptions import NetworkError
from carbon_aegis.utils.constants import (
    EMISSION_FACTORS_ENDPOINT,
    FACILITIES_ENDPOINT,
    GHG_EMISSIONS_ENDPOINT,
)

logger = logging.getLogger(__name__)


def caller_headers(user: CallerContext) -> dict[str, str]:
    """Headers identifying the caller to the API."""
    headers = {"X-User-Id": user.user_id, "X-User-Role": user.role.value}
    if user.organization_id is not None:
        headers["X-Organization-Id"] = str(user.organization_id)
    return headers


class CarbonAegisClient:
    def __init__(self, http: httpx.AsyncClient, factor_transport: Literal["post", "get"] = "post"):
        """
        Args:
            http: Configured httpx client (base URL, caller headers)
            factor_transport: How lookup_factor sends its query by default
        """
        self.http = http
        self.factor_transport = factor_transport

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await self.http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise NetworkError(f"Request to {url} failed: {e}", original_exception=e) from e
        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response):
        if response.is_success:
            return
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            detail = body.get("detail") or body.get("message") or body.get("error")
        else:
            detail = response.text
        logger.error(
            f"{response.request.method} {response.request.url} returned {response.status_code}: {detail}"
        )
        raise NetworkError(
            f"{detail or 'Request failed'} (HTTP {response.status_code})",
            status_code=response.status_code,
        )

    async def _get_json(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        response = await self._request("GET", url, params=params)
        self._raise_for_status(response)
        return response.json()

    async def list_emissions(self, organization_id: Optional[int] = None) -> list[dict]:
        params = {"organizationId": organization_id} if organization_id is not None else None
        return await self._get_json(GHG_EMISSIONS_ENDPOINT, params)

    async def list_facilities(self) -> list[dict]:
        return await self._get_json(FACILITIES_ENDPOINT)

    async def emissions_summary(self, organization_id: Optional[int] = None) -> EmissionsOverview:
        params = {"organizationId": organization_id} if organization_id is not None else None
        data = await self._get_json(f"{GHG_EMISSIONS_ENDPOINT}/summary", params)
        return EmissionsOverview.model_validate(data)

    async def lookup_factor(
        self, query: FactorQuery, transport: Optional[Literal["post", "get"]] = None
    ) -> Optional[EmissionFactorLookup]:
        """
        Look up a factor, as JSON body (POST) or query string (GET).

        Returns:
            The lookup, or None when the API has no matching factor
        """
        transport = transport or self.factor_transport
        if transport == "get":
            response = await self._request("GET", EMISSION_FACTORS_ENDPOINT, params=query.as_params())
        else:
            response = await self._request("POST", EMISSION_FACTORS_ENDPOINT, json=query.as_params())

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info(f"No factor found for {query.as_params()}")
            return None
        self._raise_for_status(response)
        return EmissionFactorLookup.model_validate(response.json())

    async def create_emission(self, record: GhgEmissionCreate) -> dict:
        payload = record.model_dump(mode="json", by_alias=True, exclude_none=True)
        response = await self._request("POST", GHG_EMISSIONS_ENDPOINT, json=payload)
        self._raise_for_status(response)
        return response.json()
