"""
Tests for the entry wizard state machine.
"""

from decimal import Decimal

import pytest

from carbon_aegis.services.exceptions import InvalidTransitionError
from carbon_aegis.workflow import EmissionEntryWizard, WizardState


def _filled_fuels_wizard() -> EmissionEntryWizard:
    wizard = EmissionEntryWizard()
    wizard.select_scope("scope1")
    wizard.select_category("Fuels")
    wizard.update_fields(
        fuel_type="Liquid fuels",
        fuel_sub_type="Diesel (100% mineral diesel)",
        unit="litres",
        quantity="500",
    )
    return wizard


def test_happy_path():
    wizard = _filled_fuels_wizard()

    assert wizard.state == WizardState.FORM_VALID
    assert wizard.form.quantity == Decimal("500")
    assert wizard.history == [
        WizardState.IDLE,
        WizardState.SCOPE_SELECTED,
        WizardState.CATEGORY_SELECTED,
        WizardState.FORM_VALID,
    ]

    wizard.begin_submit()
    wizard.mark_saved()

    assert wizard.state == WizardState.IDLE
    assert wizard.form.category is None
    assert wizard.history[-2:] == [WizardState.SAVED, WizardState.IDLE]


def test_category_requires_scope():
    wizard = EmissionEntryWizard()

    with pytest.raises(InvalidTransitionError):
        wizard.select_category("Fuels")


def test_unknown_scope_and_foreign_category():
    wizard = EmissionEntryWizard()

    with pytest.raises(ValueError):
        wizard.select_scope("scope3")

    wizard.select_scope("scope1")
    with pytest.raises(ValueError):
        wizard.select_category("UK electricity")
    assert wizard.state == WizardState.SCOPE_SELECTED


def test_changing_category_clears_details():
    wizard = _filled_fuels_wizard()

    wizard.select_category("Bioenergy")

    assert wizard.state == WizardState.CATEGORY_SELECTED
    assert wizard.form.fuel_type is None
    assert wizard.form.quantity is None
    assert wizard.form.scope == "scope1"


def test_changing_fuel_type_clears_sub_type_and_unit():
    wizard = _filled_fuels_wizard()

    wizard.update_field("fuel_type", "Gaseous fuels")

    assert wizard.form.fuel_sub_type is None
    assert wizard.form.unit is None
    assert wizard.form.quantity == Decimal("500")
    assert wizard.state == WizardState.CATEGORY_SELECTED
    assert set(wizard.field_errors) == {"fuelSubType", "unit"}


@pytest.mark.parametrize("values", [{"scope": "scope2"}, {"category": "Fuels"}, {"colour": "red"}])
def test_update_rejects_other_fields(values):
    wizard = _filled_fuels_wizard()

    with pytest.raises(ValueError):
        wizard.update_fields(**values)


def test_submit_requires_valid_form():
    wizard = EmissionEntryWizard()
    wizard.select_scope("scope2")
    wizard.select_category("UK electricity")

    with pytest.raises(InvalidTransitionError):
        wizard.begin_submit()


def test_failed_submit_keeps_form_for_retry():
    wizard = _filled_fuels_wizard()
    wizard.begin_submit()

    wizard.mark_failed("Matching factor not found")

    assert wizard.state == WizardState.ERROR
    assert wizard.error_message == "Matching factor not found"
    assert wizard.form.fuel_sub_type == "Diesel (100% mineral diesel)"

    wizard.begin_submit()
    assert wizard.state == WizardState.SUBMITTING
    assert wizard.error_message is None


def test_cancel():
    wizard = _filled_fuels_wizard()

    wizard.cancel()

    assert wizard.state == WizardState.IDLE
    assert wizard.form.scope is None
    with pytest.raises(InvalidTransitionError):
        wizard.cancel()


def test_mark_saved_only_while_submitting():
    wizard = _filled_fuels_wizard()

    with pytest.raises(InvalidTransitionError):
        wizard.mark_saved()
