from typing import Any, Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import DATABASE_URL, STORE_TIMEOUT_SECONDS


def engine_options(url: str, timeout_seconds: float) -> dict[str, Any]:
    """Bound store calls at the driver so a slow call fails inside its own session."""
    if url.startswith("sqlite"):
        # sqlite3 raises "database is locked" once it has waited this long for a lock.
        return {"connect_args": {"check_same_thread": False, "timeout": timeout_seconds}}
    return {"pool_timeout": timeout_seconds}


engine = create_engine(DATABASE_URL, future=True, **engine_options(DATABASE_URL, STORE_TIMEOUT_SECONDS))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)

Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
