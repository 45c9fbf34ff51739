"""
Stock Store - current on-hand quantity per (resource, warehouse)

Quantities change only through `apply_delta`. Nothing here commits: the
Stock Adjustment Service wraps each call together with its ledger append.
"""
from sqlalchemy.orm import Session
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from typing import List, Optional
from uuid import UUID

from logistics.core.exceptions import InvalidArgument, NotFound, InsufficientStock, Conflict
from logistics.models import Stock, StockMovement
from .reference_service import ReferenceService

class StockStore:
    """Stock rows keyed by id and by (resource_id, warehouse_id)"""

    @staticmethod
    def get(db: Session, resource_id: UUID, warehouse_id: UUID) -> Stock:
        stock = db.query(Stock).filter(
            Stock.resource_id == resource_id,
            Stock.warehouse_id == warehouse_id
        ).first()
        if not stock:
            raise NotFound("Stock", "resource_id/warehouse_id", f"{resource_id}/{warehouse_id}")
        return stock

    @staticmethod
    def get_by_id(db: Session, stock_id: UUID) -> Stock:
        stock = db.get(Stock, stock_id)
        if not stock:
            raise NotFound("Stock", "id", stock_id)
        return stock

    @staticmethod
    def list_stocks(
        db: Session,
        resource_id: Optional[UUID] = None,
        warehouse_id: Optional[UUID] = None
    ) -> List[Stock]:
        query = db.query(Stock)
        
        if resource_id:
            query = query.filter(Stock.resource_id == resource_id)
        
        if warehouse_id:
            query = query.filter(Stock.warehouse_id == warehouse_id)
        
        return query.order_by(Stock.created_at).all()

    @staticmethod
    def create(db: Session, resource_id: UUID, warehouse_id: UUID, initial_quantity: int) -> Stock:
        """First stocking of a resource in a warehouse"""
        if initial_quantity is None or initial_quantity < 0:
            raise InvalidArgument(
                f"Initial stock quantity cannot be negative. Provided: {initial_quantity}"
            )
        
        ReferenceService.get_resource(db, resource_id)
        ReferenceService.get_warehouse(db, warehouse_id)
        
        existing = db.query(Stock.id).filter(
            Stock.resource_id == resource_id,
            Stock.warehouse_id == warehouse_id
        ).first()
        if existing:
            raise Conflict(
                f"Stock already exists for resource {resource_id} in warehouse {warehouse_id}"
            )
        
        stock = Stock(
            resource_id=resource_id,
            warehouse_id=warehouse_id,
            quantity=initial_quantity
        )
        db.add(stock)
        try:
            db.flush()
        except IntegrityError as exc:
            # Lost a race against a concurrent create for the same pair
            raise Conflict(
                f"Stock already exists for resource {resource_id} in warehouse {warehouse_id}"
            ) from exc
        return stock

    @staticmethod
    def apply_delta(db: Session, stock_id: UUID, delta: int) -> Stock:
        """
        Add a signed delta to the stored quantity.

        The guard lives in the UPDATE itself, so the read-modify-write is a
        single statement under the row lock and a concurrent adjustment of the
        same row always sees the committed quantity.
        """
        result = db.execute(
            update(Stock)
            .where(Stock.id == stock_id, Stock.quantity + delta >= 0)
            .values(quantity=Stock.quantity + delta)
            .execution_options(synchronize_session=False)
        )
        
        if result.rowcount == 0:
            stock = db.get(Stock, stock_id, populate_existing=True)
            if not stock:
                raise NotFound("Stock", "id", stock_id)
            raise InsufficientStock(
                f"Insufficient stock. Available: {stock.quantity}, "
                f"requested reduction: {abs(delta)}. Stock id: {stock_id}",
                available=stock.quantity,
                requested=abs(delta),
                stock_id=stock_id
            )
        
        return db.get(Stock, stock_id, populate_existing=True)

    @staticmethod
    def delete(db: Session, stock_id: UUID) -> None:
        """Remove a stock row that has no movement history"""
        stock = StockStore.get_by_id(db, stock_id)
        
        has_history = db.query(StockMovement.id)\
            .filter(StockMovement.stock_id == stock_id)\
            .first()
        if has_history:
            raise Conflict(f"Stock {stock_id} has movement history and cannot be deleted")
        
        db.delete(stock)
        try:
            db.flush()
        except IntegrityError as exc:
            # A movement was recorded after the history check
            raise Conflict(f"Stock {stock_id} has movement history and cannot be deleted") from exc
