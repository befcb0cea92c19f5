import logging
import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Values are read once at import time after ``.env`` is loaded.
    """

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: str = os.getenv("PORT", "8080")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")

    CORS_ALLOWED_ORIGINS_ENV: str = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000")

    # Reject empty hosts and ports outside 0..65535 after conversion
    STRICT_IP_PORT: bool = _env_flag("STRICT_IP_PORT", "true")

    @staticmethod
    def allowed_origins(extra_origins: List[str] | None = None) -> List[str]:
        merged = [o.strip() for o in os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000").split(",") if o.strip()]
        if extra_origins:
            merged.extend(extra_origins)
        # Deduplicate while preserving order
        seen = set()
        result: List[str] = []
        for origin in merged:
            if origin not in seen:
                seen.add(origin)
                result.append(origin)
        return result

    @classmethod
    def port(cls) -> int:
        return int(cls.PORT)

    @classmethod
    def validate(cls) -> None:
        if not cls.PORT.isdigit() or not 0 < int(cls.PORT) <= 65535:
            raise ValueError(f"PORT must be an integer between 1 and 65535, got {cls.PORT!r}")
        if cls.LOG_LEVEL not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL {cls.LOG_LEVEL!r} is not a known logging level")

