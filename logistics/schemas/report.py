"""
Reporting Schemas
"""
from pydantic import BaseModel
from typing import List, Dict
from datetime import datetime
from uuid import UUID

class LowStockRow(BaseModel):
    stock_id: UUID
    resource_id: UUID
    warehouse_id: UUID
    quantity: int
    critical: bool

class LowStockReport(BaseModel):
    threshold: int
    critical_threshold: int
    rows: List[LowStockRow]

class ActivityReport(BaseModel):
    since: datetime
    movement_count: int
    quantity_by_kind: Dict[str, int]
