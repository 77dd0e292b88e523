import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import api_router
from app.core.config import Settings, settings as default_settings
from app.core.database import create_db_engine, init_db
from app.core.errors import setup_error_handling
from app.core.log import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_db_engine(settings.database_url, echo=settings.sql_echo)
        init_db(engine)
        app.state.engine = engine
        logger.info("%s started", settings.app_title)
        try:
            yield
        finally:
            engine.dispose()
            logger.info("Database engine disposed")

    app = FastAPI(title=settings.app_title, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_error_handling(app)

    @app.get("/")
    def health():
        return {"message": "OK"}

    app.include_router(api_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=default_settings.host, port=default_settings.port, reload=True)
