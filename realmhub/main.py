"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from realmhub.config import Settings, get_settings
from realmhub.infrastructure.database import SessionLocal, engine, initialize_database
from realmhub.infrastructure.realtime import RealtimeGateway, SqlAlchemyRealtimeStore
from realmhub.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    """Configure the root logger once for the whole process."""

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa la base de datos y el gateway en tiempo real; libera los recursos al cerrar."""

    settings = get_settings()
    setup_logging(settings)
    initialize_database()
    gateway = RealtimeGateway.from_settings(settings, SqlAlchemyRealtimeStore(SessionLocal))
    app.state.realtime_gateway = gateway
    logger.info("Realtime gateway ready (require_auth=%s)", gateway.require_auth)
    try:
        yield
    finally:
        await gateway.shutdown()
        app.state.realtime_gateway = None
        engine.dispose()


def create_app() -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    settings = get_settings()
    app = FastAPI(title="RealmHub API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
