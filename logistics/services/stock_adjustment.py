"""
Stock Adjustment Service - the only path that changes a stock quantity

Every accepted change updates the stock row and appends exactly one movement
in the same commit. Rejected changes leave both untouched.
"""
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from contextlib import contextmanager
from typing import Optional, Tuple
from uuid import UUID
from datetime import datetime, timezone
import logging

from logistics.core.exceptions import (
    StockLedgerError, InvalidArgument, InsufficientStock, ConsistencyError
)
from logistics.models import Stock, MovementKind
from .stock_store import StockStore
from .movement_ledger import MovementLedger

logger = logging.getLogger(__name__)


@contextmanager
def ledger_transaction(db: Session, operation: str, subject):
    """Commit the enclosed stock and ledger writes together, or neither"""
    try:
        yield
        db.commit()
    except InsufficientStock as e:
        db.rollback()
        logger.warning(f"{operation} rejected for {subject}: {e.message}")
        raise
    except StockLedgerError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"Consistency fault during {operation} for {subject}; rolled back")
        raise ConsistencyError(f"Could not commit {operation} for {subject}") from e
    except Exception:
        db.rollback()
        logger.exception(f"Unexpected error during {operation} for {subject}; rolled back")
        raise


class StockAdjustmentService:
    """Stock mutations: create, adjust, transfer, delete"""

    @staticmethod
    def resolve_kind(delta: int, kind: Optional[MovementKind] = None) -> MovementKind:
        """Infer the movement kind from the sign of delta, or check an explicit one"""
        if delta is None or delta == 0:
            raise InvalidArgument("Stock adjustment delta cannot be zero.")
        
        if kind is None:
            return MovementKind.ENTRY if delta > 0 else MovementKind.EXIT
        
        try:
            kind = MovementKind(kind)
        except ValueError:
            raise InvalidArgument(f"Unknown movement kind: {kind}") from None
        
        if kind == MovementKind.ENTRY and delta < 0:
            raise InvalidArgument(f"ENTRY movement requires a positive delta. Provided: {delta}")
        if kind == MovementKind.EXIT and delta > 0:
            raise InvalidArgument(f"EXIT movement requires a negative delta. Provided: {delta}")
        return kind

    @staticmethod
    def adjust(
        db: Session,
        stock_id: UUID,
        delta: int,
        timestamp: Optional[datetime] = None,
        kind: Optional[MovementKind] = None,
        order_id: Optional[UUID] = None,
        shipment_id: Optional[UUID] = None,
        reason: Optional[str] = None
    ) -> Stock:
        """
        Apply a signed delta and record the matching movement.

        InsufficientStock is a business outcome, not a fault: it is raised
        unchanged, nothing is written to the ledger and the call is not retried.
        """
        movement_kind = StockAdjustmentService.resolve_kind(delta, kind)
        occurred_at = timestamp or datetime.now(timezone.utc)
        MovementLedger.check_entry(movement_kind, abs(delta), occurred_at, reason)
        
        with ledger_transaction(db, "adjust", f"stock {stock_id}"):
            stock = StockStore.apply_delta(db, stock_id, delta)
            MovementLedger.append(
                db,
                stock_id=stock.id,
                kind=movement_kind,
                quantity=abs(delta),
                timestamp=occurred_at,
                order_id=order_id,
                shipment_id=shipment_id,
                reason=reason
            )
        
        db.refresh(stock)
        logger.info(
            f"Stock {stock_id} adjusted by {delta} ({movement_kind.value}), "
            f"new quantity {stock.quantity}"
        )
        return stock

    @staticmethod
    def create_stock(
        db: Session,
        resource_id: UUID,
        warehouse_id: UUID,
        initial_quantity: int = 0,
        timestamp: Optional[datetime] = None
    ) -> Stock:
        """Create a stock row; a positive initial quantity is recorded as an ENTRY"""
        occurred_at = timestamp or datetime.now(timezone.utc)
        if initial_quantity is not None and initial_quantity > 0:
            MovementLedger.check_entry(MovementKind.ENTRY, initial_quantity, occurred_at)
        
        with ledger_transaction(db, "create", f"resource {resource_id} in warehouse {warehouse_id}"):
            stock = StockStore.create(db, resource_id, warehouse_id, initial_quantity)
            if initial_quantity > 0:
                MovementLedger.append(
                    db,
                    stock_id=stock.id,
                    kind=MovementKind.ENTRY,
                    quantity=initial_quantity,
                    timestamp=occurred_at,
                    reason="Initial stock"
                )
        
        db.refresh(stock)
        logger.info(f"Stock {stock.id} created with quantity {initial_quantity}")
        return stock

    @staticmethod
    def transfer(
        db: Session,
        source_stock_id: UUID,
        target_stock_id: UUID,
        quantity: int,
        timestamp: Optional[datetime] = None,
        shipment_id: Optional[UUID] = None,
        reason: Optional[str] = None
    ) -> Tuple[Stock, Stock]:
        """
        Move quantity between two warehouses holding the same resource.

        Recorded as an EXIT on the source and an ENTRY on the target sharing
        one shipment reference, committed as a single unit.
        """
        if quantity is None or quantity <= 0:
            raise InvalidArgument(f"Transfer quantity must be positive. Provided: {quantity}")
        if source_stock_id == target_stock_id:
            raise InvalidArgument("Transfer source and target must be different stock records")
        
        source = StockStore.get_by_id(db, source_stock_id)
        target = StockStore.get_by_id(db, target_stock_id)
        if source.resource_id != target.resource_id:
            raise InvalidArgument("Transfer source and target must hold the same resource")
        
        occurred_at = timestamp or datetime.now(timezone.utc)
        MovementLedger.check_entry(MovementKind.EXIT, quantity, occurred_at, reason)
        
        # Fixed row order so two opposite transfers cannot deadlock
        legs = sorted(
            [
                (source_stock_id, -quantity, MovementKind.EXIT),
                (target_stock_id, quantity, MovementKind.ENTRY),
            ],
            key=lambda leg: str(leg[0])
        )
        
        with ledger_transaction(db, "transfer", f"stock {source_stock_id} -> {target_stock_id}"):
            for stock_id, delta, movement_kind in legs:
                StockStore.apply_delta(db, stock_id, delta)
                MovementLedger.append(
                    db,
                    stock_id=stock_id,
                    kind=movement_kind,
                    quantity=quantity,
                    timestamp=occurred_at,
                    shipment_id=shipment_id,
                    reason=reason
                )
        
        logger.info(f"Transferred {quantity} from stock {source_stock_id} to {target_stock_id}")
        return StockStore.get_by_id(db, source_stock_id), StockStore.get_by_id(db, target_stock_id)

    @staticmethod
    def delete_stock(db: Session, stock_id: UUID) -> None:
        with ledger_transaction(db, "delete", f"stock {stock_id}"):
            StockStore.delete(db, stock_id)
        
        logger.info(f"Stock {stock_id} deleted")
