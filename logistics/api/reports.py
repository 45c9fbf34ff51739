"""
Reporting API Router
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from logistics.core import get_db, get_settings
from logistics.services import ReportService
from logistics.schemas.report import LowStockReport, ActivityReport

report_router = APIRouter(prefix="/reports", tags=["reports"])


@report_router.get("/low-stock", response_model=LowStockReport)
def low_stock_report(
    threshold: Optional[int] = Query(None),
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db)
):
    settings = get_settings()
    threshold = settings.LOW_STOCK_THRESHOLD if threshold is None else threshold
    rows = ReportService.low_stock(
        db,
        threshold=threshold,
        critical_threshold=settings.CRITICAL_STOCK_THRESHOLD,
        limit=limit or settings.LOW_STOCK_LIST_LIMIT
    )
    return {
        "threshold": threshold,
        "critical_threshold": settings.CRITICAL_STOCK_THRESHOLD,
        "rows": rows,
    }


@report_router.get("/activity", response_model=ActivityReport)
def activity_report(hours: Optional[int] = Query(None, ge=1), db: Session = Depends(get_db)):
    settings = get_settings()
    return ReportService.recent_activity(db, hours or settings.RECENT_ACTIVITY_HOURS)
