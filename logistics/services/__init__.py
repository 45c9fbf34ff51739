# Services Package
from .reference_service import ReferenceService
from .movement_ledger import MovementLedger
from .stock_store import StockStore
from .availability import AvailabilityAggregator
from .stock_adjustment import StockAdjustmentService
from .order_admission import OrderItemAdmissionService
from .report_service import ReportService

__all__ = [
    "ReferenceService",
    "MovementLedger",
    "StockStore",
    "AvailabilityAggregator",
    "StockAdjustmentService",
    "OrderItemAdmissionService",
    "ReportService",
]
