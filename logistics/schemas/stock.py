"""
Stock Schemas
"""
from pydantic import BaseModel, Field
from typing import Optional, Dict
from datetime import datetime
from uuid import UUID

from logistics.models import MovementKind

class StockCreate(BaseModel):
    resource_id: UUID
    warehouse_id: UUID
    quantity: int = 0

class StockAdjust(BaseModel):
    delta: int  # Positive adds stock, negative removes it
    kind: Optional[MovementKind] = None  # Inferred from the sign of delta when omitted
    occurred_at: Optional[datetime] = None
    order_id: Optional[UUID] = None
    shipment_id: Optional[UUID] = None
    reason: Optional[str] = Field(None, max_length=200)

class StockTransfer(BaseModel):
    source_stock_id: UUID
    target_stock_id: UUID
    quantity: int
    occurred_at: Optional[datetime] = None
    shipment_id: Optional[UUID] = None
    reason: Optional[str] = Field(None, max_length=200)

class StockResponse(BaseModel):
    id: UUID
    resource_id: UUID
    warehouse_id: UUID
    quantity: int
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class TransferResponse(BaseModel):
    source: StockResponse
    target: StockResponse

class MovementResponse(BaseModel):
    id: UUID
    stock_id: UUID
    kind: MovementKind
    quantity: int
    occurred_at: datetime
    order_id: Optional[UUID] = None
    shipment_id: Optional[UUID] = None
    reason: Optional[str] = None

    class Config:
        from_attributes = True

class AvailabilityResponse(BaseModel):
    resource_id: UUID
    total_available: int
    by_warehouse: Dict[UUID, int] = {}
