import logging
from contextlib import contextmanager
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import settings
from app.core.exceptions import StoreError, StoreErrorKind

logger = logging.getLogger(__name__)

Base = declarative_base()


def create_store_engine(url: str, key: Optional[str] = None, **kwargs):
    """Build the engine for the data store, using the access key as password."""
    db_url = make_url(url)
    if key and not db_url.password:
        db_url = db_url.set(password=key)

    if db_url.get_backend_name() == "sqlite":
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        engine = create_engine(db_url, **kwargs)

        # SQLite ignores foreign keys unless asked per connection
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(db_url, pool_pre_ping=True, **kwargs)


engine = create_store_engine(settings.DATABASE_URL, settings.DATABASE_KEY)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    # Registers every table on Base.metadata
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def store_operation(db: Session, kind: StoreErrorKind):
    """Turn driver failures into a StoreError with a fixed public message."""
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Data store %s failed: %s", kind.value, exc)
        raise StoreError(kind) from exc
