import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

logger = logging.getLogger(__name__)

_IN_MEMORY_SQLITE = ("sqlite://", "sqlite:///:memory:")


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    if not database_url:
        raise RuntimeError("DATABASE_URL is not configured")

    options: dict = {"echo": echo, "pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        # requests are served from a threadpool
        options["connect_args"] = {"check_same_thread": False}
        if database_url in _IN_MEMORY_SQLITE:
            options["poolclass"] = StaticPool

    engine = create_engine(database_url, **options)
    logger.info("Database engine created (dialect=%s)", engine.dialect.name)
    return engine


def init_db(engine: Engine) -> None:
    # IMPORTANT: Import models so metadata contains tables
    import app.models  # noqa: F401
    SQLModel.metadata.create_all(engine)


def get_session(request: Request) -> Iterator[Session]:
    with Session(request.app.state.engine) as session:
        yield session
