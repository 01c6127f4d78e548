"""
Factories for EmissionFactor rows.
"""
from datetime import datetime
from decimal import Decimal

import factory

from carbon_aegis.database.schemas import EmissionFactorDBModel
from carbon_aegis.test.factory.base_factory import AsyncSQLAlchemyFactory
from carbon_aegis.test.factory.create_async_session import async_session
from carbon_aegis.utils.constants import Category, Scope


class EmissionFactorFactory(AsyncSQLAlchemyFactory):
    """Liquid fuel factor; level2 varies per instance."""

    class Meta:
        model = EmissionFactorDBModel
        sqlalchemy_session = async_session
        sqlalchemy_session_persistence = "commit"

    category_id = Category.FUELS
    scope = Scope.SCOPE_1
    level1 = "Liquid fuels"
    level2 = factory.Sequence(lambda n: f"Test fuel {n}")
    level3 = None
    level4 = None
    column_text = None
    uom = "litres"
    ghg_unit = "kg CO2e"
    ghg_conversion_factor = Decimal("2.5")
    year = 2024
    created_at = factory.LazyFunction(datetime.utcnow)
    updated_at = factory.LazyFunction(datetime.utcnow)


class DieselFactorFactory(EmissionFactorFactory):
    level2 = "Diesel (100% mineral diesel)"
    ghg_conversion_factor = Decimal("2.66155")


class UkElectricityFactorFactory(EmissionFactorFactory):
    category_id = Category.UK_ELECTRICITY
    scope = Scope.SCOPE_2
    level1 = "UK electricity"
    level2 = None
    uom = "kWh"
    ghg_conversion_factor = Decimal("0.20705")


class DeliveryVehicleFactorFactory(EmissionFactorFactory):
    category_id = Category.DELIVERY_VEHICLES
    level1 = "Vans"
    level2 = "HGV (all diesel)"
    uom = "km"
    ghg_conversion_factor = Decimal("0.25")
