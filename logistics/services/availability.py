"""
Availability - total on-hand quantity of a resource across all warehouses
"""
from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import Dict
from uuid import UUID

from logistics.models import Stock

class AvailabilityAggregator:
    """Read-only sums over committed stock rows"""

    @staticmethod
    def total_available(db: Session, resource_id: UUID) -> int:
        """Sum of quantity over every warehouse; 0 when the resource was never stocked"""
        total = db.query(func.sum(Stock.quantity))\
            .filter(Stock.resource_id == resource_id)\
            .scalar()
        return int(total or 0)

    @staticmethod
    def by_warehouse(db: Session, resource_id: UUID) -> Dict[UUID, int]:
        rows = db.query(Stock.warehouse_id, Stock.quantity)\
            .filter(Stock.resource_id == resource_id)\
            .all()
        return {row.warehouse_id: int(row.quantity) for row in rows}
