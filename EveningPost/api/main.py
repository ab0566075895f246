from __future__ import annotations

import logging
import random
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from EveningPost.core.config import Settings, get_settings
from EveningPost.core.logging import configure_logging
from EveningPost.core.schemas import HealthResponse
from EveningPost.core.seed_data import seed_store
from EveningPost.core.storage import ContentStore

from .dependencies import AppSettings
from .routes import articles_router, categories_router

logger = logging.getLogger("EveningPost.api")


def build_store(settings: Settings) -> ContentStore:
    rng = random.Random(settings.TRENDING_SEED) if settings.TRENDING_SEED is not None else None
    store = ContentStore(rng=rng)
    if settings.SEED_SAMPLE_DATA:
        seed_store(store)
    return store


def create_app(settings: Optional[Settings] = None, store: Optional[ContentStore] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Read-only content API for The Evening Post: articles, categories and home page sections.",
        version=settings.VERSION,
    )
    # Seeding finishes here, before uvicorn binds the socket.
    app.state.settings = settings
    app.state.store = store if store is not None else build_store(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(articles_router)
    app.include_router(categories_router)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health(app_settings: AppSettings) -> HealthResponse:
        return HealthResponse(status="ok", service=app_settings.APP_NAME, version=app_settings.VERSION)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error"},
        )

    logger.info(
        "%s %s ready with %d articles in %d categories",
        settings.APP_NAME,
        settings.VERSION,
        len(app.state.store.articles),
        len(app.state.store.categories),
    )
    return app


app = create_app()
