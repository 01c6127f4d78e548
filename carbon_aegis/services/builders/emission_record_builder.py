"""
Emission record builder.

Combines the quantity of a filled-in form with its resolved conversion factor
into the record that is saved for the organisation.
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import ValidationError

from carbon_aegis.pydantic_models.caller import CallerContext
from carbon_aegis.pydantic_models.emission_factor import EmissionFactorLookup
from carbon_aegis.pydantic_models.emission_form import EmissionFormState
from carbon_aegis.pydantic_models.ghg_emission import GhgEmissionCreate
from carbon_aegis.services.builders.unit_converter import UnitConverter
from carbon_aegis.services.exceptions import AuthorizationGapError, EmissionRecordBuildError
from carbon_aegis.utils.constants import NON_CONCRETE_CLIENTS

logger = logging.getLogger(__name__)


def current_reporting_period() -> str:
    return datetime.now().strftime("%Y-%m")


def is_concrete_client(selected_client: Optional[str | int]) -> bool:
    """True when the client selector names one organisation (not blank, 'all' or 'none')."""
    if selected_client is None:
        return False
    return str(selected_client).strip().lower() not in NON_CONCRETE_CLIENTS


def has_authorization_gap(user: Optional[CallerContext], selected_client: Optional[str | int]) -> bool:
    """A consultant must pick a concrete client before saving."""
    return bool(user and user.is_consultant and not is_concrete_client(selected_client))


def target_organization_id(
    user: Optional[CallerContext], selected_client: Optional[str | int]
) -> Optional[int]:
    """
    Organisation to attach to a new record.

    Only a consultant with a concrete client sends one; everyone else leaves it
    out and the server files the record under the caller's own organisation.
    """
    if not (user and user.is_consultant and is_concrete_client(selected_client)):
        return None
    try:
        return int(str(selected_client).strip())
    except ValueError:
        raise AuthorizationGapError(f"Unknown client organization '{selected_client}'") from None


def select_source(form_state: EmissionFormState) -> str:
    """First non-blank of fuel sub-type, energy type and fuel type."""
    for value in (form_state.fuel_sub_type, form_state.energy_type, form_state.fuel_type):
        if value and value.strip():
            return value
    return ""


def build_record(
    form_state: EmissionFormState,
    factor: EmissionFactorLookup | Decimal | str | None,
    user: Optional[CallerContext] = None,
    selected_client: Optional[str | int] = None,
    reporting_period: Optional[str] = None,
) -> GhgEmissionCreate:
    """
    Build the record to save for a form and its conversion factor.

    co2Equivalent = quantity x conversionFactor, computed in Decimal.

    Args:
        form_state: Filled-in form, including scope and category
        factor: Resolved lookup or bare conversion factor
        user: Acting user, decides whether organizationId is attached
        selected_client: Client chosen by a consultant
        reporting_period: Period of the record, defaults to the current month

    Raises:
        EmissionRecordBuildError: Scope, category, quantity or factor is missing or not a number
            or the resulting record does not fit its fields
        AuthorizationGapError: A consultant's client is not an organisation id
    """
    if not form_state.scope or not form_state.category:
        raise EmissionRecordBuildError("Please select scope and category first", field="category")

    quantity = UnitConverter.to_finite_decimal(form_state.quantity)
    if quantity is None:
        raise EmissionRecordBuildError(f"Quantity {form_state.quantity!r} is not a number", field="quantity")

    raw_factor = factor.conversion_factor if isinstance(factor, EmissionFactorLookup) else factor
    conversion_factor = UnitConverter.to_finite_decimal(raw_factor)
    if conversion_factor is None:
        raise EmissionRecordBuildError(
            f"Emission factor {raw_factor!r} is missing or not a number", field="emissionFactor"
        )

    co2_equivalent = quantity * conversion_factor
    organization_id = target_organization_id(user, selected_client)

    try:
        record = GhgEmissionCreate(
            organization_id=organization_id,
            scope=form_state.scope,
            category=form_state.category,
            source=select_source(form_state),
            activity_data=UnitConverter.format_decimal(quantity),
            unit=form_state.unit or "",
            emission_factor=UnitConverter.format_decimal(conversion_factor),
            co2_equivalent=UnitConverter.format_decimal(co2_equivalent),
            reporting_period=reporting_period or current_reporting_period(),
        )
    except ValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error.get("loc") else None
        raise EmissionRecordBuildError(f"Emission record is not valid: {error['msg']}", field=field) from None

    logger.debug(
        f"Built {record.scope} record for {record.category}: "
        f"{record.activity_data} x {record.emission_factor} = {record.co2_equivalent}"
    )
    return record
