"""FastAPI application factory, startup hooks and error mapping."""

import logging
from typing import Optional

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from profrate.config import Settings, get_settings
from profrate.database import Store
from profrate.errors import ProfRateError
from profrate.routes import router
from profrate.seed import seed_demo_data
from profrate.tracing import setup_tracing

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run startup tasks before the app begins serving requests."""
    settings: Settings = app.state.settings
    store: Store = app.state.store

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    logger.info("Initialising database …")
    store.init_db()

    if settings.seed_on_startup:
        logger.info("Seeding demo data …")
        seed_demo_data(store)

    logger.info("ProfRate API ready")
    yield

    store.dispose()
    logger.info("ProfRate API shutdown complete")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI):
    @app.exception_handler(ProfRateError)
    async def profrate_error_handler(request: Request, exc: ProfRateError):
        return _error(exc.status_code, exc.message)

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Store failure on %s %s", request.method, request.url.path)
        return _error(500, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        first = exc.errors()[0] if exc.errors() else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        return _error(422, f"{location}: {first.get('msg', 'invalid request')}")


def create_app(settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    """Build an app around its own store.

    Serve with ``uvicorn --factory profrate.main:create_app``.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="ProfRate API",
        description="Professor search, rating statistics and rating submission",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store or Store(settings.database_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(router, prefix="/api")

    if settings.tracing_enabled:
        setup_tracing(app, app.state.store, settings)

    return app
