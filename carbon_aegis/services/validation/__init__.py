from carbon_aegis.services.validation.schema_selector import (
    ValidationRules,
    get_validation_schema,
)

__all__ = ["ValidationRules", "get_validation_schema"]
