"""
Order Item Admission API Router
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from uuid import UUID

from logistics.core import get_db
from logistics.core.exceptions import StockLedgerError
from logistics.services import OrderItemAdmissionService
from logistics.schemas.order import OrderItemRequest, AdmissionResponse, OrderItemResponse
from .errors import http_error

order_router = APIRouter(tags=["orders"])


@order_router.post("/order-items/validate", response_model=AdmissionResponse)
def validate_order_item(data: OrderItemRequest, db: Session = Depends(get_db)):
    """Advisory check only: nothing is reserved"""
    try:
        available = OrderItemAdmissionService.validate(db, data.resource_id, data.quantity)
    except StockLedgerError as e:
        raise http_error(e)
    return {
        "resource_id": data.resource_id,
        "requested": data.quantity,
        "available": available,
        "admitted": True,
    }


@order_router.post("/orders/{order_id}/items", response_model=OrderItemResponse, status_code=201)
def add_order_item(order_id: UUID, data: OrderItemRequest, db: Session = Depends(get_db)):
    try:
        return OrderItemAdmissionService.admit(db, order_id, data.resource_id, data.quantity)
    except StockLedgerError as e:
        raise http_error(e)
