# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()  # Load from .env file in project root


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_VERIFY_SSL = _env_bool("API_VERIFY_SSL", "true")
_SURVEYOR_ENDPOINT = os.getenv("SURVEYOR_ENDPOINT", "/api/topographe")
_CITIES_ENDPOINT = os.getenv("CITIES_ENDPOINT", "/cities")

# Listing Settings
_DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
_MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", "100"))
_DEFAULT_SORT_BY = os.getenv("DEFAULT_SORT_BY", "firstName")
_DEFAULT_SORT_DIR = os.getenv("DEFAULT_SORT_DIR", "asc")

# Language: "fr" or "en"
_APP_LANGUAGE = os.getenv("APP_LANGUAGE", "fr")

# Console log level (the log file always records DEBUG)
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Surveyor Console"
    APP_TITLE: str = "Surveyor Administration Console"
    VERSION: str = "1.0.0"

    # HTTP API Backend Settings
    # Reads from .env file (API_BASE_URL, API_TIMEOUT, API_VERIFY_SSL)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL
    SURVEYOR_ENDPOINT: str = _SURVEYOR_ENDPOINT
    CITIES_ENDPOINT: str = _CITIES_ENDPOINT

    # Surveyor listing
    DEFAULT_PAGE_SIZE: int = _DEFAULT_PAGE_SIZE
    MAX_PAGE_SIZE: int = _MAX_PAGE_SIZE
    PAGE_SIZE_OPTIONS: tuple = (10, 25, 50, 100)
    DEFAULT_SORT_BY: str = _DEFAULT_SORT_BY
    DEFAULT_SORT_DIR: str = _DEFAULT_SORT_DIR

    # Localization
    LANGUAGE: str = _APP_LANGUAGE
    SUPPORTED_LANGUAGES: tuple = ("fr", "en")

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_LEVEL: str = _LOG_LEVEL
