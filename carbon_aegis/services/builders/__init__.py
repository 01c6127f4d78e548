from carbon_aegis.services.builders.emission_record_builder import (
    build_record,
    has_authorization_gap,
    is_concrete_client,
    select_source,
    target_organization_id,
)
from carbon_aegis.services.builders.unit_converter import UnitConverter

__all__ = [
    "UnitConverter",
    "build_record",
    "has_authorization_gap",
    "is_concrete_client",
    "select_source",
    "target_organization_id",
]
