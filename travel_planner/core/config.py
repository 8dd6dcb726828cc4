import os
import logging
from pydantic import BaseModel, Field
from typing import List
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Config(BaseModel):
    app_name: str = "Travel Planner"
    environment: str = os.getenv("APP_ENV", "development")
    api_prefix: str = "/api"
    version: str = "1.0.0"
    request_id_header: str = "X-Request-ID"

    # Storage: "memory" keeps everything in process memory, "sql" uses SQLAlchemy
    storage_backend: str = os.getenv("STORAGE_BACKEND", "memory")
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./travel_planner.db")

    # Planner defaults
    home_country: str = os.getenv("HOME_COUNTRY", "KR")
    default_total_leave_days: float = float(os.getenv("DEFAULT_TOTAL_LEAVE_DAYS", "15"))
    seed_default_user: bool = _env_flag("SEED_DEFAULT_USER", "true")
    max_recommendations: int = 10

    # CORS: comma-separated origins loaded from env.
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            o.strip()
            for o in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://localhost:5000,"
                "http://127.0.0.1:3000,http://127.0.0.1:5000",
            ).split(",")
            if o.strip()
        ]
    )

    # Rate limiting
    rate_limit_enabled: bool = _env_flag("RATE_LIMIT_ENABLED", "true")
    rate_limit_per_minute: int = int(os.getenv("RATE_LIMIT_PER_MINUTE", "120"))


settings = Config()

_logger = logging.getLogger(__name__)
if settings.storage_backend not in ("memory", "sql"):
    raise RuntimeError(
        f"FATAL: STORAGE_BACKEND must be 'memory' or 'sql', got '{settings.storage_backend}'."
    )
if settings.environment != "development" and settings.storage_backend == "memory":
    _logger.warning("⚠ Using the in-memory store outside development: data is lost on restart.")
