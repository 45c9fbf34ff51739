"""
Reference Tables: Warehouse, Resource

Lookup-only collaborators of the stock ledger. Stock rows point at them by id.
"""
from sqlalchemy import Column, String, Boolean, Text
from logistics.core import Base
from .base import UUIDMixin, TimestampMixin

class Warehouse(Base, UUIDMixin, TimestampMixin):
    """Warehouse"""
    __tablename__ = "warehouse"
    
    code = Column(String(20), unique=True, nullable=False)
    name = Column(String(200), nullable=False)
    location = Column(Text)
    is_active = Column(Boolean, default=True)

class Resource(Base, UUIDMixin, TimestampMixin):
    """Resource catalog entry (anything that can be stocked)"""
    __tablename__ = "resource"
    
    code = Column(String(50), unique=True, nullable=False, index=True)
    name = Column(String(200), nullable=False)
    resource_type = Column(String(50))  # FUEL, AMMUNITION, RATIONS, SPARE_PART, ...
    criticality = Column(String(20))  # LOW, MEDIUM, HIGH
    is_active = Column(Boolean, default=True)
