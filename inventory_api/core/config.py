# inventory_api/core/config.py

from __future__ import annotations

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _get_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _get_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class Settings:
    """
    Single application configuration, read once from the environment.
    - Storage: one JSON document (DATA_PATH) + an upload directory.
    - HTTP: PORT selects the listening port (default 5000).
    - Logs: JSON on stdout by default.
    """

    def __init__(self) -> None:
        # ---------- Metadata ----------
        self.ENV = os.getenv("ENV", "dev")
        self.APP_NAME = os.getenv("APP_NAME", "inventory-api")
        self.APP_TITLE = os.getenv("APP_TITLE", "Inventory API")
        self.APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
        self.APP_DESCRIPTION = os.getenv(
            "APP_DESCRIPTION", "Products, stock and order approval"
        )

        # ---------- Server ----------
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = _get_int("PORT", 5000)

        # ---------- Storage ----------
        self.DATA_PATH = Path(os.getenv("DATA_PATH", "data/data.json"))
        self.UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", "uploads"))
        self.UPLOADS_URL_PREFIX = os.getenv("UPLOADS_URL_PREFIX", "/uploads").rstrip("/")
        self.FRONTEND_DIR = Path(os.getenv("FRONTEND_DIR", "frontend"))

        # ---------- Logging ----------
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        self.LOG_FORMAT = os.getenv("LOG_FORMAT", "json")

        # ---------- CORS ----------
        self.CORS_ALLOW_ORIGINS = [
            o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
        ]
        self.CORS_ALLOW_CREDENTIALS = _get_bool("CORS_ALLOW_CREDENTIALS", True)
        self.CORS_ALLOW_METHODS = os.getenv("CORS_ALLOW_METHODS", "*")
        self.CORS_ALLOW_HEADERS = os.getenv("CORS_ALLOW_HEADERS", "*")

    def upload_url(self, filename: str) -> str:
        return f"{self.UPLOADS_URL_PREFIX}/{filename}"


settings = Settings()
