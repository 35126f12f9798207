"""Generate database engine / sessions"""

from typing import Any

from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base


def build_engine(settings: Settings) -> Engine:
    options: dict[str, Any] = {}
    if settings.database_url.startswith("sqlite"):
        # requests are served from a thread pool
        options["connect_args"] = {"check_same_thread": False}
        if ":memory:" in settings.database_url:
            # a single shared connection, otherwise every connection sees its own empty database
            options["poolclass"] = StaticPool
    return create_engine(settings.database_url, echo=settings.echo_sql, **options)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    # Ensure all tables are created
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, expire_on_commit=False)
