"""
Factory for saved GHG emission entries.
"""
from datetime import datetime

import factory

from carbon_aegis.database.schemas import GhgEmissionDBModel
from carbon_aegis.test.factory.base_factory import AsyncSQLAlchemyFactory
from carbon_aegis.test.factory.create_async_session import async_session
from carbon_aegis.utils.constants import Category, Scope


class GhgEmissionFactory(AsyncSQLAlchemyFactory):
    class Meta:
        model = GhgEmissionDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    organization_id = 1
    scope = Scope.SCOPE_1
    category = Category.FUELS
    source = "Diesel (100% mineral diesel)"
    activity_data = "100"
    unit = "litres"
    emission_factor = "2.5"
    co2_equivalent = "250"
    reporting_period = "2024-01"
    created_at = factory.LazyFunction(datetime.utcnow)
    updated_at = factory.LazyFunction(datetime.utcnow)
