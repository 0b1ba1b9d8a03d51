# todo_app/core/config.py
import logging
import os

from dotenv import load_dotenv

load_dotenv()

log = logging.getLogger(__name__)

ENV = os.getenv("ENV", "dev")

# ─────────────────────────────
# Identity cookie
DEFAULT_JWT_SECRET_KEY = "change-me-to-a-long-random-secret-key"
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", DEFAULT_JWT_SECRET_KEY)
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
IDENTITY_COOKIE_NAME = os.getenv("IDENTITY_COOKIE_NAME", "identity")
COOKIE_SECURE = os.getenv("COOKIE_SECURE", "false").lower() == "true"
COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "lax")

if JWT_SECRET_KEY == DEFAULT_JWT_SECRET_KEY:
    log.warning("JWT_SECRET_KEY is not set; identity cookies use the default key")

# ─────────────────────────────
# Database pool (one shared connection unless told otherwise)
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "1"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "0"))

# ─────────────────────────────
# Server
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))
