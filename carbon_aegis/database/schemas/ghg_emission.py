"""
GhgEmission SQLAlchemy model.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Index, Integer, String

from carbon_aegis.database import Base


class GhgEmissionDBModel(Base):
    """
    One emission entry saved by an organisation.

    Numeric values are kept as the strings the entry form produced so the
    activity quantity is stored exactly as entered.
    """

    __tablename__ = "ghg_emissions"

    id = Column(Integer, primary_key=True, autoincrement=True)

    organization_id = Column(
        Integer,
        nullable=False,
        index=True,
        comment="Owning organisation",
    )

    scope = Column(String(10), nullable=False, comment="scope1, scope2 or scope3")
    category = Column(String(100), nullable=False, comment="Emission category (e.g., 'Fuels')")
    source = Column(String(200), nullable=True, comment="Fuel sub-type, energy type or fuel type")

    activity_data = Column(String(50), nullable=False, comment="Quantity as entered")
    unit = Column(String(50), nullable=True, comment="Unit of the quantity")
    emission_factor = Column(String(50), nullable=True, comment="Conversion factor used")
    co2_equivalent = Column(String(50), nullable=True, comment="activity_data x emission_factor")

    reporting_period = Column(
        String(20),
        nullable=True,
        comment="Reporting period, YYYY-MM or YYYY",
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("ix_ghg_emissions_org_scope", "organization_id", "scope"),
        Index("ix_ghg_emissions_org_period", "organization_id", "reporting_period"),
        {"comment": "Saved GHG emission entries"},
    )

    def __repr__(self):
        return f"<GhgEmissionDBModel: {self.organization_id} {self.scope} {self.category} {self.co2_equivalent}>"
