"""Generate database session"""

from typing import Any, Generator

from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings, get_settings
from src.db.schema import Base


def build_engine(settings: Settings) -> Engine:
    options: dict[str, Any] = {"echo": settings.database_echo}
    if settings.database_url.startswith("sqlite") and ":memory:" in settings.database_url:
        # one shared connection, otherwise every session would see its own empty database
        options["connect_args"] = {"check_same_thread": False}
        options["poolclass"] = StaticPool
    return create_engine(settings.database_url, **options)


engine = build_engine(get_settings())
SessionLocal = sessionmaker(bind=engine)

# Ensure all tables are created
Base.metadata.create_all(bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
