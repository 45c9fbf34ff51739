"""
Stock & Movement Models

Stock holds the current on-hand quantity per (resource, warehouse).
StockMovement is the append-only audit trail; one row per accepted change.
"""
from sqlalchemy import (
    Column, String, Integer, DateTime, CheckConstraint, UniqueConstraint,
    Enum as SQLEnum, event, func
)
import enum

from logistics.core import Base
from logistics.core.exceptions import InvalidArgument
from .base import UUIDMixin, TimestampMixin, uuid_ref


class MovementKind(str, enum.Enum):
    ENTRY = "ENTRY"
    EXIT = "EXIT"
    TRANSFER = "TRANSFER"


class Stock(Base, UUIDMixin, TimestampMixin):
    """On-hand quantity of one resource in one warehouse"""
    __tablename__ = "stock"
    
    resource_id = uuid_ref("resource.id")
    warehouse_id = uuid_ref("warehouse.id")
    quantity = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("resource_id", "warehouse_id", name="ux_stock_resource_warehouse"),
        CheckConstraint("quantity >= 0", name="ck_stock_quantity_non_negative"),
    )


class StockMovement(Base, UUIDMixin):
    """Stock Movement Ledger"""
    __tablename__ = "stock_movement"
    
    stock_id = uuid_ref("stock.id")
    
    # Movement info
    kind = Column(SQLEnum(MovementKind), nullable=False)
    quantity = Column(Integer, nullable=False)  # Always positive, direction is in kind
    occurred_at = Column(DateTime(timezone=True), nullable=False, index=True)
    
    # Causal references
    order_id = uuid_ref(nullable=True)
    shipment_id = uuid_ref(nullable=True)
    reason = Column(String(200))
    
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_stock_movement_quantity_positive"),
    )


@event.listens_for(StockMovement, "before_update")
def _reject_movement_update(mapper, connection, target):
    raise InvalidArgument(f"Stock movement {target.id} is append-only and cannot be modified")


@event.listens_for(StockMovement, "before_delete")
def _reject_movement_delete(mapper, connection, target):
    raise InvalidArgument(f"Stock movement {target.id} is append-only and cannot be deleted")
