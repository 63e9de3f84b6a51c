from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from product_import.core.settings import get_import_settings

# Base for the catalog tables
Base = declarative_base()

_SessionLocal: Optional[sessionmaker] = None


def create_session_factory(database_url: Optional[str] = None, echo: Optional[bool] = None) -> sessionmaker:
    """
        Creates the engine and the session factory for the catalog database.

        Args:
            database_url: SQLAlchemy URL, defaults to the one from the import settings.
            echo: Log the emitted SQL, defaults to the import settings.

        Returns:
            sessionmaker: Factory bound to the new engine.
    """
    settings = get_import_settings()
    url = database_url or settings.database_url
    engine_kwargs = {"echo": settings.database_echo if echo is None else echo}
    if url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}

    engine = create_engine(url, **engine_kwargs)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """
        Database session generator.

        Opens a session with the default session factory and closes it once
        the caller is done with it.

        Yields:
            Session: An open SQLAlchemy session.
    """
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = create_session_factory()

    db = _SessionLocal()
    try:
        yield db
    finally:
        db.close()
