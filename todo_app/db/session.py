# todo_app/db/session.py
import os
import logging
from contextlib import contextmanager

from sqlalchemy.engine import url as sa_url
from sqlmodel import Session, SQLModel, create_engine, text

from todo_app.core.config import DB_MAX_OVERFLOW, DB_POOL_SIZE

log = logging.getLogger(__name__)


def _mask(url: str) -> str:
    """Hide the password when logging a database URL."""
    if "://" not in url:
        return url
    scheme, rest = url.split("://", 1)
    if "@" in rest and ":" in rest.split("@", 1)[0]:
        creds, tail = rest.split("@", 1)
        user = creds.split(":", 1)[0]
        return f"{scheme}://{user}:***@{tail}"
    return url


def _strip_outer_quotes(s: str) -> str:
    if not s:
        return s
    if (s[0] == s[-1]) and s[0] in ("'", '"', "`"):
        return s[1:-1].strip()
    return s


def _build_db_url() -> str:
    url = _strip_outer_quotes(os.getenv("DATABASE_URL", "").strip())
    if not url:
        raise RuntimeError("DATABASE_URL is missing!")

    # Heroku/Render style URLs
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+psycopg2://", 1)

    try:
        sa_url.make_url(url)
    except Exception as e:
        raise RuntimeError(f"Invalid DATABASE_URL: {url!r} ({e})") from e

    log.info("Database URL: %s", _mask(url))
    return url


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_recycle": 1800,
        "pool_size": DB_POOL_SIZE,
        "max_overflow": DB_MAX_OVERFLOW,
    }


DATABASE_URL = _build_db_url()
engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))


def get_session():
    """FastAPI Depends(get_session) generator."""
    with Session(engine) as s:
        yield s


def create_all_tables():
    # import for side effects: table registration on SQLModel.metadata
    from todo_app.models import task, user  # noqa: F401

    SQLModel.metadata.create_all(engine)


def check_connection() -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


@contextmanager
def session_scope():
    """Session for code paths outside Depends(get_session)."""
    s = Session(engine)
    try:
        yield s
    finally:
        s.close()
