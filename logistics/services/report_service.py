"""
Report Service - low stock and ledger activity

Thresholds are passed in by the caller rather than read from settings here.
"""
from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import Dict, List, Optional
from datetime import datetime, timedelta, timezone

from logistics.models import Stock, StockMovement, MovementKind
from .movement_ledger import MovementLedger, as_utc

class ReportService:

    @staticmethod
    def low_stock(db: Session, threshold: int, critical_threshold: int, limit: int = 20) -> List[Dict]:
        """Stock rows at or below threshold, lowest first"""
        stocks = db.query(Stock)\
            .filter(Stock.quantity <= threshold)\
            .order_by(Stock.quantity.asc())\
            .limit(limit)\
            .all()
        
        return [
            {
                "stock_id": s.id,
                "resource_id": s.resource_id,
                "warehouse_id": s.warehouse_id,
                "quantity": s.quantity,
                "critical": s.quantity <= critical_threshold
            }
            for s in stocks
        ]

    @staticmethod
    def recent_activity(db: Session, hours: int, now: Optional[datetime] = None) -> Dict:
        """Movement count and per-kind quantity totals over the last `hours`"""
        since = as_utc(now or datetime.now(timezone.utc)) - timedelta(hours=hours)
        
        totals = db.query(
            StockMovement.kind,
            func.sum(StockMovement.quantity).label("total")
        ).filter(
            StockMovement.occurred_at >= since
        ).group_by(StockMovement.kind).all()
        
        quantity_by_kind = {kind.value: 0 for kind in MovementKind}
        for row in totals:
            quantity_by_kind[MovementKind(row.kind).value] = int(row.total or 0)
        
        return {
            "since": since,
            "movement_count": MovementLedger.count_since(db, since),
            "quantity_by_kind": quantity_by_kind
        }
