"""
Stock Ledger Errors

Services raise these; the API layer maps them onto HTTP status codes.
"""
from typing import Optional


class StockLedgerError(Exception):
    """Base class for all stock ledger errors"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(StockLedgerError):
    """Malformed input, rejected before any state change"""
    status_code = 400


class NotFound(StockLedgerError):
    status_code = 404

    def __init__(self, entity: str, field: str, value):
        super().__init__(f"{entity} not found with {field}: {value}")
        self.entity = entity
        self.field = field
        self.value = value


class InsufficientStock(StockLedgerError):
    """Requested reduction or order quantity exceeds what is on hand"""
    status_code = 409

    def __init__(self, message: str, available: int, requested: int, stock_id: Optional[object] = None):
        super().__init__(message)
        self.available = available
        self.requested = requested
        self.stock_id = stock_id


class Conflict(StockLedgerError):
    status_code = 409


class ConsistencyError(StockLedgerError):
    """Stock update and ledger append could not be committed together"""
    status_code = 500
