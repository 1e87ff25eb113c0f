import logging
from typing import Optional
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import URL, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from job_board.core.config import Settings
from job_board.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


def build_database_url(database_url: Optional[str], service_key: Optional[str]) -> URL:
    """
    Combine the connection URL and the service credential.

    The credential is injected as the URL password whenever the URL names a
    host, so the key never has to be pasted into DATABASE_URL itself.

    Raises:
        ConfigurationError: If either value is missing
    """
    if not database_url or not database_url.strip():
        raise ConfigurationError("DATABASE_URL is not set")
    if not service_key or not service_key.strip():
        raise ConfigurationError("DATABASE_SERVICE_KEY is not set")

    url = make_url(database_url.strip())
    if url.host:
        url = url.set(password=service_key.strip())
    return url


def create_session_factory(settings: Settings) -> sessionmaker:
    """
    Create the engine and session factory once at process start.

    The returned factory is kept on app.state and shared by every request.
    """
    url = build_database_url(settings.DATABASE_URL, settings.DATABASE_SERVICE_KEY)

    if url.get_backend_name() == "sqlite":
        # SQLite needs special connect args; in-memory databases must share one connection
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, **kwargs)
    else:
        engine = create_engine(
            url,
            pool_pre_ping=True,  # Verify connections before using them
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW
        )

    logger.info(f"Database engine created for {url.render_as_string(hide_password=True)}")
    return sessionmaker(autoflush=False, bind=engine)


def init_db(session_factory: sessionmaker, create_tables: bool = False) -> None:
    """
    Register models and optionally create missing tables.

    The hosted database owns the schema; create_tables is meant for local
    SQLite runs only.
    """
    from job_board.models import job  # noqa: F401  Import models to register them

    if create_tables:
        Base.metadata.create_all(bind=session_factory.kw["bind"])


def get_db(request: Request):
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
