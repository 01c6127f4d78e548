"""
Domain exceptions of the emission entry workflow.

Each exception carries the context a caller needs to show a useful message;
the API layer maps them to HTTP status codes.
"""
from typing import Any, Optional


class CarbonAegisError(Exception):
    """Base class for emission entry errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FormValidationError(CarbonAegisError):
    """A required field of the entry form is missing or invalid."""

    def __init__(self, field_errors: dict[str, str], category: Optional[str] = None):
        self.field_errors = dict(field_errors)
        self.category = category
        fields = ", ".join(sorted(self.field_errors))
        super().__init__(f"Invalid emission form for {category or 'no category'}: {fields}")


class LookupNotFoundError(CarbonAegisError):
    """No emission factor matches the query."""

    def __init__(self, query: Any = None, message: str = "Matching factor not found"):
        self.query = query
        super().__init__(message)


class NetworkError(CarbonAegisError):
    """A request to the backend failed or returned an unexpected status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.status_code = status_code
        self.original_exception = original_exception
        super().__init__(message)


class AuthorizationGapError(CarbonAegisError):
    """A consultant tried to save without choosing a client organisation."""

    def __init__(self, message: str = "Please select a client organization first"):
        super().__init__(message)


class EmissionRecordBuildError(CarbonAegisError):
    """Quantity or conversion factor cannot be turned into a CO2e value."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class InvalidTransitionError(CarbonAegisError):
    """The entry wizard was asked to move along a transition it does not have."""

    def __init__(self, current_state: Any, action: str):
        self.current_state = current_state
        self.action = action
        super().__init__(f"Cannot {action} while in state {getattr(current_state, 'name', current_state)}")
