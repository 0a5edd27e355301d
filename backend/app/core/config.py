"""
Application configuration using Pydantic BaseSettings.
Loads environment variables and provides typed configuration.
"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project metadata
    PROJECT_NAME: str = "PaintOps Contractor Platform"
    VERSION: str = "0.1.0"
    API_V1_PREFIX: str = "/api/v1"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./paintops.db"

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Company branding used on exported documents
    COMPANY_NAME: str = "PaintOps Painting LLC"
    COMPANY_TAGLINE: str = "Professional Painting Services"
    COMPANY_ADDRESS: str = ""
    COMPANY_PHONE: str = ""
    COMPANY_EMAIL: str = ""
    QUOTE_VALIDITY_DAYS: int = 30

    # Payment provider (Stripe)
    STRIPE_SECRET_KEY: str = ""
    STRIPE_API_BASE: str = "https://api.stripe.com/v1"
    PAYMENT_CURRENCY: str = "usd"

    # Application cache
    CACHE_TTL_SECONDS: int = 300

    # Logging / observability
    LOG_LEVEL: str = "INFO"
    OTEL_SERVICE_NAME: str = "paintops-backend"
    OTEL_ENVIRONMENT: str = "development"

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_PER_MINUTE: int = 60

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
