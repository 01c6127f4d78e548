"""
Factory for facilities.
"""
from datetime import datetime

import factory

from carbon_aegis.database.schemas import FacilityDBModel
from carbon_aegis.test.factory.base_factory import AsyncSQLAlchemyFactory
from carbon_aegis.test.factory.create_async_session import async_session


class FacilityFactory(AsyncSQLAlchemyFactory):
    class Meta:
        model = FacilityDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    organization_id = 1
    name = factory.Sequence(lambda n: f"Site {n}")
    address = "1 Wellington Place"
    city = "Leeds"
    state = None
    country = "United Kingdom"
    postal_code = "LS1 4AP"
    facility_type = "office"
    description = None
    created_at = factory.LazyFunction(datetime.utcnow)
    updated_at = factory.LazyFunction(datetime.utcnow)
