from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Logistics Stock Ledger"
    APP_PORT: int = 9210
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./logistics.db"

    # Reporting thresholds (passed explicitly to ReportService)
    LOW_STOCK_THRESHOLD: int = 10
    CRITICAL_STOCK_THRESHOLD: int = 3
    LOW_STOCK_LIST_LIMIT: int = 20
    RECENT_ACTIVITY_HOURS: int = 24

    class Config:
        env_file = ".env"
        extra = "ignore"

@lru_cache()
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
