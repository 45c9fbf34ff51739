"""
Order Item Admission Schemas
"""
from pydantic import BaseModel
from uuid import UUID

class OrderItemRequest(BaseModel):
    resource_id: UUID
    quantity: int

class AdmissionResponse(BaseModel):
    resource_id: UUID
    requested: int
    available: int
    admitted: bool

class OrderItemResponse(BaseModel):
    id: UUID
    order_id: UUID
    resource_id: UUID
    quantity: int

    class Config:
        from_attributes = True
