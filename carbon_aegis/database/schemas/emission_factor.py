"""
EmissionFactor SQLAlchemy model.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Index, Integer, Numeric, String

from carbon_aegis.database import Base


class EmissionFactorDBModel(Base):
    """
    Emission factor lookup table.

    Rows follow the DEFRA/BEIS conversion factor hierarchy: level1 is the fuel
    or activity family, level2/level3 narrow it down, uom is the unit the
    activity quantity is measured in.
    """

    __tablename__ = "emission_factors"

    id = Column(Integer, primary_key=True, autoincrement=True)

    category_id = Column(
        String(100),
        nullable=True,
        index=True,
        comment="Emission category this factor belongs to (e.g., 'Fuels')",
    )

    scope = Column(
        String(10),
        nullable=True,
        comment="GHG Protocol scope (scope1, scope2 or scope3)",
    )

    level1 = Column(
        String(200),
        nullable=False,
        index=True,
        comment="Top level of the factor hierarchy (e.g., 'Liquid fuels')",
    )

    level2 = Column(String(200), nullable=True, comment="Second level (e.g., 'Diesel (100% mineral diesel)')")
    level3 = Column(String(200), nullable=True, comment="Third level")
    level4 = Column(String(200), nullable=True, comment="Fourth level")

    column_text = Column(
        String(200),
        nullable=True,
        comment="Column heading from the source workbook",
    )

    uom = Column(
        String(50),
        nullable=False,
        comment="Unit of measurement of the activity (e.g., litres, kWh, km)",
    )

    ghg_unit = Column(
        String(50),
        nullable=True,
        comment="Unit of the result (e.g., kg CO2e)",
    )

    ghg_conversion_factor = Column(
        Numeric(12, 5),
        nullable=False,
        comment="Mass of CO2e per unit of activity",
    )

    year = Column(Integer, nullable=False, default=2024, comment="Publication year of the factor set")

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("ix_emission_factors_level1_level2_uom", "level1", "level2", "uom"),
        {"comment": "Emission factor lookup table for CO2e calculations"},
    )

    def __repr__(self):
        return f"<EmissionFactorDBModel: {self.level1} / {self.level2} / {self.uom}>"
