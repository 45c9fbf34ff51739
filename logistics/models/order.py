"""
Order Models
"""
from sqlalchemy import Column, String, Integer, CheckConstraint
from logistics.core import Base
from .base import UUIDMixin, TimestampMixin, uuid_ref

class Order(Base, UUIDMixin, TimestampMixin):
    """Order Header"""
    __tablename__ = "order_header"
    
    reference = Column(String(100), index=True)
    unit_code = Column(String(50))  # Requesting unit
    status = Column(String(20), default="CREATED", index=True)  # CREATED, VALIDATED, COMPLETED, CANCELLED

class OrderItem(Base, UUIDMixin):
    """Order Item/Line"""
    __tablename__ = "order_item"
    
    order_id = uuid_ref("order_header.id")
    resource_id = uuid_ref("resource.id")
    quantity = Column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_item_quantity_positive"),
    )
