from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.hikes import router as hikes_router
from app.core.config import Settings, settings as default_settings
from app.core.logging_setup import configure_logging
from app.db import create_db_engine, create_session_factory, init_db
from app.repositories.hikes import HikeRepository
from app.stores.sql import SqlHikeStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app with its store opened once and injected into the repository."""
    settings = settings or default_settings
    configure_logging(settings.log_level, sql_echo=settings.sql_echo)

    engine = create_db_engine(settings.database_url, timeout=settings.database_timeout)
    repository = HikeRepository(SqlHikeStore(create_session_factory(engine)))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Create DB tables (hikes) on startup
        init_db(engine)
        logger.info("Hike store ready", extra={"database_url": engine.url.render_as_string(hide_password=True)})
        yield
        engine.dispose()

    app = FastAPI(title="Hike Log", lifespan=lifespan)
    app.state.engine = engine
    app.state.repository = repository

    # Allow CORS for the mobile/web frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(hikes_router)

    @app.get("/")
    def root():
        return {"message": "Hike log backend is running"}

    return app


app = create_app()
