from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env if present
ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


def _database_uri() -> str:
    # Read from environment and then unset so it does not leak to subprocesses
    return os.environ.pop("DATABASE_URL", None) or "sqlite:///blogdesk.db"


def _engine_options(uri: str) -> dict:
    if uri.startswith("postgresql"):
        # Posts live in the 'blog' schema in Postgres
        return {"connect_args": {"options": "-c search_path=blog"}}
    return {}


class Config:
    SECRET_KEY: str = os.getenv("SECRET_KEY", os.urandom(32).hex())

    SITE_NAME = os.getenv("SITE_NAME", "Blogdesk")

    # Database
    SQLALCHEMY_DATABASE_URI: str = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(SQLALCHEMY_DATABASE_URI)

    # Sessions
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = os.getenv("FLASK_ENV", "production") == "production"
    SESSION_COOKIE_SAMESITE = "Strict"
    SESSION_LIFETIME_MINUTES = int(os.getenv("SESSION_LIFETIME_MINUTES", "30"))

    # Admin form submissions are held for this long before being processed
    POST_WRITE_DELAY_SECONDS = float(os.getenv("POST_WRITE_DELAY_SECONDS", "1.0"))

    # Request body limit; posts are plain markdown
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(1024 * 1024)))

    # Rate limiting
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "100 per minute")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")

    # Security headers. No page ships scripts, so scripts are refused outright.
    SECURITY_CSP = (
        "default-src 'self'; "
        "script-src 'none'; "
        "style-src 'self'; "
        "img-src 'self'; "
        "font-src 'self'; "
        "object-src 'none'; "
        "base-uri 'self'; "
        "form-action 'self'; "
        "frame-ancestors 'none'"
    )
    SECURITY_HSTS_SECONDS = 31536000
    SECURITY_PERMISSIONS_POLICY = (
        "geolocation=(), microphone=(), camera=(), payment=(), usb=(), "
        "magnetometer=(), gyroscope=(), accelerometer=()"
    )

    # Flask env
    ENV = os.getenv("FLASK_ENV", "production")
    DEBUG = ENV != "production"
