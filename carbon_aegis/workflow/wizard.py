"""
State machine of the emission entry wizard.

One object holds the whole in-progress entry: the current state, the form and
the last error. Every transition is a method; calling one from a state that
does not allow it raises ``InvalidTransitionError``.
"""
import logging
from enum import Enum
from typing import Any, Optional

from carbon_aegis.pydantic_models.emission_form import EmissionFormState
from carbon_aegis.services import taxonomy
from carbon_aegis.services.exceptions import InvalidTransitionError
from carbon_aegis.services.validation import ValidationRules, get_validation_schema

logger = logging.getLogger(__name__)


class WizardState(str, Enum):
    IDLE = "idle"
    SCOPE_SELECTED = "scope_selected"
    CATEGORY_SELECTED = "category_selected"
    FORM_VALID = "form_valid"
    SUBMITTING = "submitting"
    SAVED = "saved"
    ERROR = "error"


# States from which the scope or category may be (re)chosen
EDITABLE_STATES = frozenset(
    {
        WizardState.IDLE,
        WizardState.SCOPE_SELECTED,
        WizardState.CATEGORY_SELECTED,
        WizardState.FORM_VALID,
        WizardState.ERROR,
    }
)
FORM_STATES = frozenset({WizardState.CATEGORY_SELECTED, WizardState.FORM_VALID, WizardState.ERROR})


class EmissionEntryWizard:
    def __init__(self):
        self.state = WizardState.IDLE
        self.form = EmissionFormState()
        self.rules: ValidationRules = get_validation_schema(None)
        self.field_errors: dict[str, str] = {}
        self.error_message: Optional[str] = None
        self.history: list[WizardState] = [WizardState.IDLE]

    def _enter(self, state: WizardState):
        logger.debug(f"Wizard {self.state.value} -> {state.value}")
        self.state = state
        self.history.append(state)

    def _require(self, allowed: frozenset[WizardState], action: str):
        if self.state not in allowed:
            raise InvalidTransitionError(self.state, action)

    def _revalidate(self):
        self.field_errors = self.rules.validate(self.form)
        target = WizardState.CATEGORY_SELECTED if self.field_errors else WizardState.FORM_VALID
        if self.state != target:
            self._enter(target)

    @property
    def scope(self) -> Optional[str]:
        return self.form.scope

    @property
    def category(self) -> Optional[str]:
        return self.form.category

    @property
    def is_valid(self) -> bool:
        return self.state == WizardState.FORM_VALID

    def select_scope(self, scope: str):
        """Choose a scope; clears any chosen category and form values."""
        self._require(EDITABLE_STATES, "select a scope")
        if scope not in taxonomy.SELECTABLE_SCOPES:
            raise ValueError(f"Unknown scope '{scope}'")

        self.form = EmissionFormState(scope=scope)
        self.rules = get_validation_schema(None)
        self.field_errors = {}
        self.error_message = None
        self._enter(WizardState.SCOPE_SELECTED)

    def select_category(self, category: str):
        """Choose a category of the current scope; resets fuel, unit and quantity."""
        self._require(EDITABLE_STATES - {WizardState.IDLE}, "select a category")
        if not taxonomy.category_belongs_to_scope(category, self.form.scope):
            raise ValueError(f"Category '{category}' is not offered under {self.form.scope}")

        self.form = self.form.cleared_details().model_copy(update={"category": category})
        self.rules = get_validation_schema(category)
        self.error_message = None
        self.field_errors = self.rules.validate(self.form)
        self._enter(WizardState.CATEGORY_SELECTED)
        if not self.field_errors:
            self._enter(WizardState.FORM_VALID)

    def update_fields(self, **values: Any):
        """
        Set form fields by attribute name and re-run the category's rules.

        Changing the fuel type clears the sub-type and unit chosen for the old one.

        Raises:
            ValueError: Unknown field, scope/category (use the select methods),
                or a value of the wrong type
        """
        self._require(FORM_STATES, "edit the form")
        forbidden = set(values) & {"scope", "category"}
        unknown = set(values) - set(EmissionFormState.model_fields)
        if forbidden or unknown:
            raise ValueError(f"Cannot update fields {sorted(forbidden | unknown)}")

        updates = dict(values)
        if "fuel_type" in updates and updates["fuel_type"] != self.form.fuel_type:
            updates.setdefault("fuel_sub_type", None)
            updates.setdefault("unit", None)

        self.form = EmissionFormState.model_validate(self.form.model_dump() | updates)
        self._revalidate()

    def update_field(self, name: str, value: Any):
        self.update_fields(**{name: value})

    def begin_submit(self):
        self._require(frozenset({WizardState.FORM_VALID, WizardState.ERROR}), "submit")
        if self.rules.validate(self.form):
            raise InvalidTransitionError(self.state, "submit an invalid form")
        self.error_message = None
        self._enter(WizardState.SUBMITTING)

    def mark_saved(self):
        """Record a successful save and start over."""
        self._require(frozenset({WizardState.SUBMITTING}), "mark the entry saved")
        self._enter(WizardState.SAVED)
        self._reset()

    def mark_failed(self, message: str):
        """Record a failed save; the form is kept so the user can retry."""
        self._require(frozenset({WizardState.SUBMITTING}), "mark the entry failed")
        self.error_message = message
        self._enter(WizardState.ERROR)

    def cancel(self):
        """Discard the entry and return to idle."""
        if self.state == WizardState.IDLE:
            raise InvalidTransitionError(self.state, "cancel")
        self._reset()

    def _reset(self):
        self.form = EmissionFormState()
        self.rules = get_validation_schema(None)
        self.field_errors = {}
        self._enter(WizardState.IDLE)
