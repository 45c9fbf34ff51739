"""
Stock API Router - creation, lookup, adjustment, transfer
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID

from logistics.core import get_db
from logistics.core.exceptions import StockLedgerError
from logistics.services import (
    StockStore, StockAdjustmentService, MovementLedger, AvailabilityAggregator
)
from logistics.schemas.stock import (
    StockCreate, StockAdjust, StockTransfer, StockResponse, TransferResponse,
    MovementResponse, AvailabilityResponse
)
from .errors import http_error

stock_router = APIRouter(tags=["stock"])


@stock_router.post("/stock", response_model=StockResponse, status_code=201)
def create_stock(data: StockCreate, db: Session = Depends(get_db)):
    try:
        return StockAdjustmentService.create_stock(
            db, data.resource_id, data.warehouse_id, data.quantity
        )
    except StockLedgerError as e:
        raise http_error(e)


@stock_router.get("/stock", response_model=List[StockResponse])
def list_stock(
    resource_id: Optional[UUID] = Query(None),
    warehouse_id: Optional[UUID] = Query(None),
    db: Session = Depends(get_db)
):
    return StockStore.list_stocks(db, resource_id, warehouse_id)


@stock_router.get("/stock/lookup", response_model=StockResponse)
def lookup_stock(
    resource_id: UUID = Query(...),
    warehouse_id: UUID = Query(...),
    db: Session = Depends(get_db)
):
    try:
        return StockStore.get(db, resource_id, warehouse_id)
    except StockLedgerError as e:
        raise http_error(e)


@stock_router.post("/stock/transfer", response_model=TransferResponse)
def transfer_stock(data: StockTransfer, db: Session = Depends(get_db)):
    try:
        source, target = StockAdjustmentService.transfer(
            db,
            data.source_stock_id,
            data.target_stock_id,
            data.quantity,
            timestamp=data.occurred_at,
            shipment_id=data.shipment_id,
            reason=data.reason
        )
    except StockLedgerError as e:
        raise http_error(e)
    return {
        "source": StockResponse.model_validate(source),
        "target": StockResponse.model_validate(target),
    }


@stock_router.get("/stock/{stock_id}", response_model=StockResponse)
def get_stock(stock_id: UUID, db: Session = Depends(get_db)):
    try:
        return StockStore.get_by_id(db, stock_id)
    except StockLedgerError as e:
        raise http_error(e)


@stock_router.delete("/stock/{stock_id}", status_code=204)
def delete_stock(stock_id: UUID, db: Session = Depends(get_db)):
    try:
        StockAdjustmentService.delete_stock(db, stock_id)
    except StockLedgerError as e:
        raise http_error(e)


@stock_router.post("/stock/{stock_id}/adjust", response_model=StockResponse)
def adjust_stock(stock_id: UUID, data: StockAdjust, db: Session = Depends(get_db)):
    try:
        return StockAdjustmentService.adjust(
            db,
            stock_id,
            data.delta,
            timestamp=data.occurred_at,
            kind=data.kind,
            order_id=data.order_id,
            shipment_id=data.shipment_id,
            reason=data.reason
        )
    except StockLedgerError as e:
        raise http_error(e)


@stock_router.get("/stock/{stock_id}/movements", response_model=List[MovementResponse])
def stock_movements(stock_id: UUID, db: Session = Depends(get_db)):
    try:
        StockStore.get_by_id(db, stock_id)
    except StockLedgerError as e:
        raise http_error(e)
    return MovementLedger.for_stock(db, stock_id)


@stock_router.get("/resources/{resource_id}/availability", response_model=AvailabilityResponse)
def resource_availability(resource_id: UUID, db: Session = Depends(get_db)):
    return {
        "resource_id": resource_id,
        "total_available": AvailabilityAggregator.total_available(db, resource_id),
        "by_warehouse": AvailabilityAggregator.by_warehouse(db, resource_id),
    }
