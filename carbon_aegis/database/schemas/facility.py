"""
Facility SQLAlchemy model.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text

from carbon_aegis.database import Base


class FacilityDBModel(Base):
    """Site or location of an organisation where emissions occur."""

    __tablename__ = "facilities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    organization_id = Column(Integer, nullable=False, index=True, comment="Owning organisation")
    name = Column(String(200), nullable=False)
    address = Column(String(300), nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(100), nullable=True)
    country = Column(String(100), nullable=True)
    postal_code = Column(String(20), nullable=True)
    facility_type = Column(String(100), nullable=True, comment="e.g., office, warehouse, plant")
    description = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<FacilityDBModel: {self.name} ({self.organization_id})>"
