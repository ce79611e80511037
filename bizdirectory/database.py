from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from bizdirectory.core.config import DATABASE_URL, SQL_ECHO


def build_engine(url: str, **kwargs):
    """Create an engine for ``url``, turning on foreign keys for SQLite"""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every session sees an empty database
            kwargs.setdefault("poolclass", StaticPool)
        engine = create_engine(url, echo=SQL_ECHO, **kwargs)

        # SQLite ignores ON DELETE CASCADE unless enabled per connection
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(url, pool_pre_ping=True, echo=SQL_ECHO, **kwargs)


# Create database engine
engine = build_engine(DATABASE_URL)

# Create declarative base
Base = declarative_base()


# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Dependency for database session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
