# storefront/database.py
import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, create_engine, Session

from storefront.core.config import get_settings
from storefront.core.errors import UpstreamUnavailable

settings = get_settings()
logger = logging.getLogger(__name__)

# ---------------------------------------------------------
# Engine setup
#
# - SQLite (default/dev): allow use across FastAPI's threadpool and
#   bound lock waits with `timeout`.
# - Postgres: bound connection attempts with `connect_timeout`.
# - pool_pre_ping=True: validate connections before using them
# ---------------------------------------------------------


def _connect_args(db_url: str) -> dict:
    if db_url.startswith("sqlite"):
        return {"check_same_thread": False, "timeout": settings.DB_TIMEOUT_SECONDS}
    if db_url.startswith("postgresql"):
        return {"connect_timeout": int(settings.DB_TIMEOUT_SECONDS)}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,  # set to True if you want to debug SQL queries
    pool_pre_ping=True,
    connect_args=_connect_args(settings.DATABASE_URL),
)


def create_db_and_tables() -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    SQLModel.metadata.create_all(engine)


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session


@contextmanager
def storage_guard(session: Session, what: str):
    """
    Translate driver/ORM failures into `UpstreamUnavailable`.

    The session is rolled back first, so a failed write never leaves a
    half-applied transaction behind.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Storage failure during %s", what)
        raise UpstreamUnavailable() from exc
