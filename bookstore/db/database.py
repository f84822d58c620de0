# /bookstore/db/database.py

from loguru import logger
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ..core.config import DATABASE_URL, SQL_ECHO
from .base import Base


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores FOREIGN KEY clauses (and their ON DELETE rules) unless
    # this pragma is set on every new connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str = DATABASE_URL, echo: bool = SQL_ECHO) -> Engine:
    """
    Creates the SQLAlchemy engine for `url`.

    SQLite gets `check_same_thread=False` (requests are served from a thread
    pool), a single shared connection for in-memory databases, and foreign key
    enforcement switched on.
    """
    engine_args = {}
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        engine_args["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            engine_args["poolclass"] = StaticPool

    engine = create_engine(url, echo=echo, **engine_args)
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def init_db(bind: Engine) -> None:
    """Creates every catalog table that does not exist yet."""
    Base.metadata.create_all(bind=bind)
    logger.info("Catalog tables ready on {}", bind.url.render_as_string(hide_password=True))


engine = build_engine()

# Each instance of this class is one database session.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency to get a DB session. One session per request, always closed.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
