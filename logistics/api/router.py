"""
API Router - JSON Endpoints
"""
from fastapi import APIRouter
from datetime import datetime, timezone

from .stock import stock_router
from .orders import order_router
from .movements import movement_router
from .reports import report_router

api_router = APIRouter(tags=["API"])

# Include sub-routers
api_router.include_router(stock_router)
api_router.include_router(order_router)
api_router.include_router(movement_router)
api_router.include_router(report_router)

# ===================== HEALTH & STATUS =====================

@api_router.get("/status")
def api_status():
    return {"status": "ok", "version": "1.0.0", "timestamp": datetime.now(timezone.utc).isoformat()}
