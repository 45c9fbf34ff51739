"""
Movement Ledger - Append-only audit trail of accepted stock changes

The ledger never commits. `append` only flushes, so the row becomes part of
whatever transaction the caller has open and is committed (or rolled back)
together with the stock update it explains.
"""
from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import List, Optional
from uuid import UUID
from datetime import datetime, timezone

from logistics.core.exceptions import InvalidArgument
from logistics.models import StockMovement, MovementKind

MAX_REASON_LENGTH = 200


def as_utc(value: datetime) -> datetime:
    """Normalize to UTC; naive datetimes are taken to already be UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class MovementLedger:
    """Write-once, read-many movement log"""

    @staticmethod
    def check_entry(
        kind: MovementKind,
        quantity: int,
        timestamp: datetime,
        reason: Optional[str] = None
    ) -> MovementKind:
        """Validate movement fields without touching the session; returns the parsed kind"""
        if quantity is None or quantity <= 0:
            raise InvalidArgument(f"Movement quantity must be positive. Provided: {quantity}")
        try:
            kind = MovementKind(kind)
        except ValueError:
            raise InvalidArgument(f"Unknown movement kind: {kind}") from None
        if not isinstance(timestamp, datetime):
            raise InvalidArgument(f"Movement timestamp must be a datetime. Provided: {timestamp!r}")
        if reason is not None and len(reason) > MAX_REASON_LENGTH:
            raise InvalidArgument(f"Movement reason cannot exceed {MAX_REASON_LENGTH} characters")
        return kind

    @staticmethod
    def append(
        db: Session,
        stock_id: UUID,
        kind: MovementKind,
        quantity: int,
        timestamp: datetime,
        order_id: Optional[UUID] = None,
        shipment_id: Optional[UUID] = None,
        reason: Optional[str] = None
    ) -> StockMovement:
        """Record one movement inside the caller's transaction"""
        kind = MovementLedger.check_entry(kind, quantity, timestamp, reason)

        movement = StockMovement(
            stock_id=stock_id,
            kind=kind,
            quantity=quantity,
            occurred_at=as_utc(timestamp),
            order_id=order_id,
            shipment_id=shipment_id,
            reason=reason
        )
        db.add(movement)
        db.flush()
        return movement

    @staticmethod
    def last_n_for_order(db: Session, order_id: UUID, n: int) -> List[StockMovement]:
        """Most recent n movements caused by an order"""
        if n <= 0:
            raise InvalidArgument(f"Limit must be positive. Provided: {n}")
        return db.query(StockMovement)\
            .filter(StockMovement.order_id == order_id)\
            .order_by(StockMovement.occurred_at.desc())\
            .limit(n)\
            .all()

    @staticmethod
    def all_for_shipment(db: Session, shipment_id: UUID) -> List[StockMovement]:
        return db.query(StockMovement)\
            .filter(StockMovement.shipment_id == shipment_id)\
            .order_by(StockMovement.occurred_at.desc())\
            .all()

    @staticmethod
    def for_stock(db: Session, stock_id: UUID) -> List[StockMovement]:
        """History of a single stock record"""
        return db.query(StockMovement)\
            .filter(StockMovement.stock_id == stock_id)\
            .order_by(StockMovement.occurred_at.desc())\
            .all()

    @staticmethod
    def since(db: Session, timestamp: datetime) -> List[StockMovement]:
        return db.query(StockMovement)\
            .filter(StockMovement.occurred_at >= as_utc(timestamp))\
            .order_by(StockMovement.occurred_at.desc())\
            .all()

    @staticmethod
    def count_since(db: Session, timestamp: datetime) -> int:
        count = db.query(func.count(StockMovement.id))\
            .filter(StockMovement.occurred_at >= as_utc(timestamp))\
            .scalar()
        return int(count or 0)
