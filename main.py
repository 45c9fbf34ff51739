"""
Logistics Stock Ledger
FastAPI Application Entry Point
"""
import uvicorn
from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from logistics.core import settings, engine, Base
from logistics.core.log_config import configure_logging
from logistics import models  # noqa: F401  (registers tables on Base.metadata)
from logistics.api.router import api_router

logger = logging.getLogger(__name__)

# Lifespan for startup/shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    # Startup: Create tables if not exist
    Base.metadata.create_all(bind=engine)
    logger.info(f"{settings.APP_NAME} starting on port {settings.APP_PORT}")
    
    yield
    
    logger.info(f"{settings.APP_NAME} shutting down")

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Warehouse stock, append-only movement ledger and order-item admission",
    version="1.0.0",
    lifespan=lifespan
)

# Include routers
app.include_router(api_router, prefix="/api")

# Health check
@app.get("/health")
def health_check():
    return {"status": "healthy", "app": settings.APP_NAME}

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.APP_PORT,
        reload=settings.DEBUG
    )
