"""
Dynamic validation schema selector.

Each emission category has its own form model listing the fields it requires.
``get_validation_schema`` picks the model for a category and wraps it in
``ValidationRules``, which reports per-field messages keyed by the wire
(camelCase) field names.
"""
import logging
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, ClassVar, Literal, Optional, Type

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from carbon_aegis.pydantic_models.emission_form import EmissionFormState
from carbon_aegis.utils.constants import Category, DELIVERY_SUBTYPE_REQUIRED_FUEL_TYPES

logger = logging.getLogger(__name__)


def _required_text(message: str):
    def check(value: Any) -> str:
        if value is None or not str(value).strip():
            raise PydanticCustomError("required", message)
        return str(value)

    return BeforeValidator(check)


def _check_quantity(value: Any) -> Decimal:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("required", "Quantity is required")
    try:
        quantity = value if isinstance(value, Decimal) else Decimal(str(value).replace(",", ""))
    except InvalidOperation:
        raise PydanticCustomError("number", "Quantity must be a number") from None
    if not quantity.is_finite():
        raise PydanticCustomError("number", "Quantity must be a number")
    if quantity < 0:
        raise PydanticCustomError("positive", "Quantity must be positive")
    return quantity


def _required(message: str):
    return Annotated[Optional[str], Field(validate_default=True), _required_text(message)]


Quantity = Annotated[Optional[Decimal], Field(validate_default=True), BeforeValidator(_check_quantity)]


class CategoryForm(BaseModel):
    """Base of the per-category form models."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    required_fields: ClassVar[tuple[str, ...]] = ()
    optional_fields: ClassVar[tuple[str, ...]] = ()
    conditional_fields: ClassVar[tuple[str, ...]] = ()


class StationaryFuelForm(CategoryForm):
    required_fields = ("fuelType", "fuelSubType", "unit", "quantity")

    category: Literal["Fuels", "Bioenergy"]
    fuel_type: _required("Fuel type is required") = None
    fuel_sub_type: _required("Fuel sub-type is required") = None
    unit: _required("Unit is required") = None
    quantity: Quantity = None


class PassengerVehicleForm(CategoryForm):
    required_fields = ("fuelType", "fuelSubType", "unit", "quantity")
    optional_fields = ("vehicleFuelType", "country")

    category: Literal["Passenger vehicles"]
    fuel_type: _required("Vehicle Category is required") = None
    fuel_sub_type: _required("Vehicle Sub-Category is required") = None
    unit: _required("Unit is required") = None
    quantity: Quantity = None
    vehicle_fuel_type: Optional[str] = None
    country: Optional[str] = None


class DeliveryVehicleForm(CategoryForm):
    """
    Delivery vehicles.

    The sub-type is required exactly when the fuel type is one of the listed
    vehicle classes; averages and other fuel types pass without one.
    """

    required_fields = ("fuelType", "unit", "quantity")
    optional_fields = ("vehicleFuelType", "country")
    conditional_fields = ("fuelSubType",)

    category: Literal["Delivery vehicles"]
    fuel_type: _required("Fuel type is required") = None
    fuel_sub_type: Annotated[Optional[str], Field(validate_default=True)] = None
    unit: _required("Unit is required") = None
    quantity: Quantity = None
    vehicle_fuel_type: Optional[str] = None
    country: Optional[str] = None

    # fuel_type is declared before fuel_sub_type, so info.data holds it once valid
    @field_validator("fuel_sub_type")
    @classmethod
    def check_sub_type(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        if info.data.get("fuel_type") in DELIVERY_SUBTYPE_REQUIRED_FUEL_TYPES:
            if not value or not value.strip():
                raise PydanticCustomError(
                    "conditional_required", "Fuel subtype is required for this fuel type"
                )
        return value


class RefrigerantForm(CategoryForm):
    required_fields = ("fuelSubType", "quantity")

    category: Literal["Refrigerant & other"]
    fuel_sub_type: _required("Refrigerant is required") = None
    quantity: Quantity = None
    fuel_type: Optional[str] = None
    unit: Optional[str] = None


class ElectricityForm(CategoryForm):
    required_fields = ("country", "unit", "quantity")

    category: Literal["UK electricity"]
    country: _required("Country is required") = None
    unit: _required("Unit is required") = None
    quantity: Quantity = None


class HeatAndSteamForm(CategoryForm):
    required_fields = ("energyType", "unit", "quantity")

    category: Literal["Heat and steam"]
    energy_type: _required("Energy type is required") = None
    unit: _required("Unit is required") = None
    quantity: Quantity = None


CATEGORY_FORMS: dict[str, Type[CategoryForm]] = {
    Category.FUELS: StationaryFuelForm,
    Category.BIOENERGY: StationaryFuelForm,
    Category.PASSENGER_VEHICLES: PassengerVehicleForm,
    Category.DELIVERY_VEHICLES: DeliveryVehicleForm,
    Category.REFRIGERANT: RefrigerantForm,
    Category.UK_ELECTRICITY: ElectricityForm,
    Category.HEAT_AND_STEAM: HeatAndSteamForm,
}


class ValidationRules:
    """
    Validation rules of one category.

    An empty rule set (no category, or a category the form does not know)
    requires nothing and accepts every form.
    """

    def __init__(self, category: Optional[str], form_model: Optional[Type[CategoryForm]] = None):
        self.category = category
        self.form_model = form_model

    @property
    def is_empty(self) -> bool:
        return self.form_model is None

    @property
    def required_fields(self) -> frozenset[str]:
        return frozenset(self.form_model.required_fields) if self.form_model else frozenset()

    @property
    def optional_fields(self) -> frozenset[str]:
        return frozenset(self.form_model.optional_fields) if self.form_model else frozenset()

    @property
    def conditional_fields(self) -> frozenset[str]:
        return frozenset(self.form_model.conditional_fields) if self.form_model else frozenset()

    def validate(self, form_state: EmissionFormState | dict) -> dict[str, str]:
        """
        Check a form against the rules.

        Args:
            form_state: Form model or dict keyed by wire or attribute names

        Returns:
            Message per failing field, empty when the form is valid
        """
        if self.form_model is None:
            return {}

        if isinstance(form_state, EmissionFormState):
            data = form_state.model_dump(by_alias=True)
        else:
            data = dict(form_state)
        data["category"] = self.category

        try:
            self.form_model.model_validate(data)
        except ValidationError as e:
            return self._field_errors(e)
        return {}

    def is_valid(self, form_state: EmissionFormState | dict) -> bool:
        return not self.validate(form_state)

    @staticmethod
    def _field_errors(error: ValidationError) -> dict[str, str]:
        field_errors: dict[str, str] = {}
        for detail in error.errors():
            loc = detail.get("loc") or ()
            field = str(loc[0]) if loc else (detail.get("ctx") or {}).get("field", "__root__")
            # first message per field wins
            field_errors.setdefault(field, detail["msg"])
        return field_errors

    def __repr__(self):
        return f"<ValidationRules: {self.category} required={sorted(self.required_fields)}>"


def get_validation_schema(category: Optional[str]) -> ValidationRules:
    """
    Select the validation rules for the chosen category.

    Args:
        category: Category identifier, or None before one is chosen

    Returns:
        Rules of the category; an empty rule set for None or unknown categories
    """
    if not category:
        return ValidationRules(None)

    form_model = CATEGORY_FORMS.get(category)
    if form_model is None:
        logger.warning(f"No validation rules for unknown category '{category}'")
        return ValidationRules(category)

    return ValidationRules(category, form_model)
