"""Database engine and per-request session management (SQLite or PostgreSQL)."""

from collections.abc import Generator

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


def _enable_sqlite_foreign_keys(dbapi_conn, connection_record) -> None:
    """SQLite ignores ON DELETE clauses unless foreign keys are switched on per connection."""
    dbapi_conn.execute("PRAGMA foreign_keys=ON")


def build_engine(url: str, echo: bool = False):
    """Create an engine; SQLite connections are shared across the request thread pool."""
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True, echo=echo)
    kwargs: dict = {"connect_args": {"check_same_thread": False}, "echo": echo}
    if _is_memory_sqlite(url):
        # One connection for the whole process, otherwise every pooled connection
        # would see its own empty database.
        kwargs["poolclass"] = StaticPool
    sqlite_engine = create_engine(url, **kwargs)
    event.listen(sqlite_engine, "connect", _enable_sqlite_foreign_keys)
    return sqlite_engine


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create any missing tables. Idempotent."""
    from app.models import Base

    Base.metadata.create_all(bind=engine)


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
