"""
Emission entry workflow.

Drives one user's entry from the wizard through factor lookup, record building
and saving, then refreshes the cached emissions list. Outcomes the user should
see are collected as notifications.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

from carbon_aegis.pydantic_models.caller import CallerContext
from carbon_aegis.pydantic_models.emission_summary import EmissionsOverview
from carbon_aegis.services.aggregators import summarize
from carbon_aegis.services.builders import build_record, has_authorization_gap, target_organization_id
from carbon_aegis.services.exceptions import (
    AuthorizationGapError,
    CarbonAegisError,
    FormValidationError,
    NetworkError,
)
from carbon_aegis.services.resolvers import EmissionFactorResolver
from carbon_aegis.utils.constants import FACILITIES_ENDPOINT, GHG_EMISSIONS_ENDPOINT
from carbon_aegis.workflow.client import CarbonAegisClient
from carbon_aegis.workflow.query_cache import QueryCache, QueryKey
from carbon_aegis.workflow.wizard import EmissionEntryWizard, WizardState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: str = "default"


class EmissionEntryWorkflow:
    def __init__(
        self,
        client: CarbonAegisClient,
        user: CallerContext,
        selected_client: Optional[str] = None,
        cache: Optional[QueryCache] = None,
    ):
        self.client = client
        self.user = user
        self.selected_client = selected_client
        self.cache = cache if cache is not None else QueryCache()
        self.resolver = EmissionFactorResolver(client)
        self.wizard = EmissionEntryWizard()
        self.notifications: list[Notification] = []

    def notify(self, title: str, description: str, variant: str = "default"):
        self.notifications.append(Notification(title, description, variant))

    def _notify_error(self, description: str):
        self.notify("Error", description, variant="destructive")

    @property
    def organization_filter(self) -> Optional[int]:
        """Organisation the lists are filtered by: the consultant's chosen client, if any."""
        if has_authorization_gap(self.user, self.selected_client):
            return None
        return target_organization_id(self.user, self.selected_client)

    @property
    def emissions_key(self) -> QueryKey:
        return QueryKey.of(GHG_EMISSIONS_ENDPOINT, {"organizationId": self.organization_filter})

    def select_client(self, selected_client: Optional[str]):
        self.selected_client = selected_client

    async def emissions(self) -> list[dict]:
        organization_id = self.organization_filter
        return await self.cache.fetch(
            self.emissions_key, lambda: self.client.list_emissions(organization_id)
        )

    async def facilities(self) -> list[dict]:
        return await self.cache.fetch(QueryKey.of(FACILITIES_ENDPOINT), self.client.list_facilities)

    async def overview(self) -> EmissionsOverview:
        """Dashboard figures computed from the cached emissions list."""
        return summarize(await self.emissions())

    async def submit(self, reporting_period: Optional[str] = None) -> dict[str, Any]:
        """
        Validate, resolve the factor, build and save the current entry.

        Returns:
            The saved record as returned by the API

        Raises:
            AuthorizationGapError: Consultant without a concrete or well-formed client; nothing is sent
            FormValidationError: Scope/category not chosen or required fields failing
            LookupNotFoundError: No factor for the selections; nothing is saved
            EmissionRecordBuildError: Quantity or factor is not a number
            NetworkError: The API could not be reached or rejected the request
        """
        wizard = self.wizard

        if not wizard.scope or not wizard.category:
            self._notify_error("Please select scope and category first")
            raise FormValidationError(
                {"category": "Please select scope and category first"}, category=wizard.category
            )

        try:
            if has_authorization_gap(self.user, self.selected_client):
                raise AuthorizationGapError()
            target_organization_id(self.user, self.selected_client)
        except AuthorizationGapError as e:
            self._notify_error(e.message)
            logger.warning(f"User {self.user.user_id} tried to save without a client organization: {e.message}")
            raise

        field_errors = wizard.rules.validate(wizard.form)
        if field_errors:
            wizard.field_errors = field_errors
            raise FormValidationError(field_errors, category=wizard.category)

        wizard.begin_submit()
        form = wizard.form
        try:
            lookup = await self.resolver.resolve_for_form(form.scope, form.category, form)
            record = build_record(
                form,
                lookup,
                user=self.user,
                selected_client=self.selected_client,
                reporting_period=reporting_period,
            )
            created = await self.client.create_emission(record)
        except CarbonAegisError as e:
            logger.error(f"Saving {form.category} emission failed: {e.message}")
            self._notify_error(e.message or "Failed to save emission data")
            if wizard.state == WizardState.SUBMITTING:
                wizard.mark_failed(e.message)
            raise

        self.notify("Success", "Emission data saved successfully")
        self.cache.invalidate(GHG_EMISSIONS_ENDPOINT)
        if wizard.state == WizardState.SUBMITTING:
            wizard.mark_saved()
        else:
            # cancelled while the request was in flight
            logger.info(f"Emission saved after the entry was cancelled (state {wizard.state.value})")

        try:
            await self.emissions()
        except NetworkError as e:
            logger.warning(f"Refetching emissions after save failed: {e.message}")

        return created

    def cancel(self):
        """Discard the entry. A request already sent is not aborted."""
        self.wizard.cancel()
