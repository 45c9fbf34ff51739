"""
Map stock ledger errors onto HTTP responses
"""
from fastapi import HTTPException

from logistics.core.exceptions import StockLedgerError, InsufficientStock, ConsistencyError


def http_error(exc: StockLedgerError) -> HTTPException:
    if isinstance(exc, InsufficientStock):
        return HTTPException(
            status_code=exc.status_code,
            detail={
                "message": exc.message,
                "available": exc.available,
                "requested": exc.requested,
            }
        )
    if isinstance(exc, ConsistencyError):
        return HTTPException(status_code=exc.status_code, detail="Stock update could not be committed")
    return HTTPException(status_code=exc.status_code, detail=exc.message)
