"""FastAPI application serving the translation catalog."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.configuration import Settings, settings
from server.lifespan import lifespan

LOCAL_ORIGINS = ["http://localhost:8000", "http://127.0.0.1:8000"]


def _allowed_origins(app_settings: Settings) -> list[str]:
    # The client-side table is public in production
    return ["*"] if app_settings.is_production else LOCAL_ORIGINS


def create_app(app_settings: Settings = settings) -> FastAPI:
    app = FastAPI(title="Translation catalog", lifespan=lifespan)
    setup_rate_limiter(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(app_settings),
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(api_router)
    return app


handler = create_app()
