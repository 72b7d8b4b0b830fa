"""
Configuration management for prodscrape.
"""
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_float(name: str, default: str) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return float(default)


def _env_int(name: str, default: str) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return int(default)


class Config:
    """Application configuration."""

    # Flask settings
    FLASK_ENV: str = os.getenv("FLASK_ENV", "development")
    FLASK_DEBUG: bool = os.getenv("FLASK_DEBUG", "False").lower() == "true"
    FLASK_HOST: str = os.getenv("FLASK_HOST", "0.0.0.0")
    FLASK_PORT: int = _env_int("FLASK_PORT", "5000")
    SECRET_KEY: Optional[str] = os.getenv("SECRET_KEY")
    SERVER_THREADS: int = _env_int("SERVER_THREADS", "4")

    # Comma separated list, "*" allows any origin
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")
    CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]

    # Fetch transport
    FETCH_TIMEOUT_S: float = _env_float("FETCH_TIMEOUT_S", "15")
    FETCH_RETRIES: int = _env_int("FETCH_RETRIES", "0")
    FETCH_BACKOFF_S: float = _env_float("FETCH_BACKOFF_S", "0.5")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @classmethod
    def validate(cls) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if cls.FETCH_TIMEOUT_S <= 0:
            errors.append(f"FETCH_TIMEOUT_S must be positive, got {cls.FETCH_TIMEOUT_S}")

        if cls.FETCH_RETRIES < 0:
            errors.append(f"FETCH_RETRIES must be >= 0, got {cls.FETCH_RETRIES}")

        if cls.SERVER_THREADS < 1:
            errors.append(f"SERVER_THREADS must be >= 1, got {cls.SERVER_THREADS}")

        if cls.FLASK_ENV == "production" and not cls.SECRET_KEY:
            errors.append("SECRET_KEY not set in environment")

        return errors

    @classmethod
    def get_cors_origins(cls) -> list[str]:
        """Parse CORS_ORIGINS into a list of origins."""
        origins = [o.strip() for o in cls.CORS_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]

    @classmethod
    def get_summary(cls) -> dict:
        """Get configuration summary (safe for logging)."""
        return {
            "flask_env": cls.FLASK_ENV,
            "flask_debug": cls.FLASK_DEBUG,
            "cors_origins": cls.get_cors_origins(),
            "fetch_timeout_s": cls.FETCH_TIMEOUT_S,
            "fetch_retries": cls.FETCH_RETRIES,
            "log_level": cls.LOG_LEVEL,
        }
