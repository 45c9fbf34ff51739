"""
Movement Ledger API Router - read-only audit queries
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID
from datetime import datetime

from logistics.core import get_db
from logistics.core.exceptions import StockLedgerError
from logistics.services import MovementLedger
from logistics.schemas.stock import MovementResponse
from .errors import http_error

movement_router = APIRouter(prefix="/movements", tags=["movements"])


@movement_router.get("", response_model=List[MovementResponse])
def movements_since(since: datetime = Query(...), db: Session = Depends(get_db)):
    return MovementLedger.since(db, since)


@movement_router.get("/count")
def count_movements_since(since: datetime = Query(...), db: Session = Depends(get_db)):
    return {"since": since, "count": MovementLedger.count_since(db, since)}


@movement_router.get("/by-order/{order_id}", response_model=List[MovementResponse])
def movements_for_order(order_id: UUID, limit: int = Query(10), db: Session = Depends(get_db)):
    try:
        return MovementLedger.last_n_for_order(db, order_id, limit)
    except StockLedgerError as e:
        raise http_error(e)


@movement_router.get("/by-shipment/{shipment_id}", response_model=List[MovementResponse])
def movements_for_shipment(shipment_id: UUID, db: Session = Depends(get_db)):
    return MovementLedger.all_for_shipment(db, shipment_id)
