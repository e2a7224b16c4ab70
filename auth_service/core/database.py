"""Database engine and session management (PostgreSQL, or SQLite for local runs and tests)."""

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from auth_service.core.config import settings

IN_MEMORY_DATABASE_URL = "sqlite://"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores FOREIGN KEY / ON DELETE CASCADE unless enabled per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL.

    SQLite URLs get foreign keys enabled; the in-memory URL additionally shares a
    single connection (StaticPool) so every session sees the same database.
    """
    if database_url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if database_url in (IN_MEMORY_DATABASE_URL, "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        new_engine = create_engine(database_url, echo=echo, **kwargs)
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)
        return new_engine
    return create_engine(database_url, pool_pre_ping=True, echo=echo)


def build_session_factory(bind: Engine) -> sessionmaker[Session]:
    """Session factory with explicit transactions; repositories flush, the unit of work commits."""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=bind)


def create_schema(bind: Engine) -> None:
    """Create all tables (in-memory store and tests; Alembic owns networked databases)."""
    from auth_service.models import Base

    Base.metadata.create_all(bind=bind)


engine = build_engine(
    IN_MEMORY_DATABASE_URL if settings.USE_IN_MEMORY_DATABASE else settings.DATABASE_URL,
    echo=settings.DEBUG,
)

SessionLocal = build_session_factory(engine)


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
