from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from typing import Optional
import logging
import os

import uvicorn

from inventory_api.config import Settings, get_settings
from inventory_api.database import Database, DatabaseError
from inventory_api.services.bootstrap import bootstrap
from inventory_api.api import products, stats, health

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def validation_message(errors) -> str:
    """Summarize request validation errors as a single client-facing message."""
    if any(error["type"] == "json_invalid" for error in errors):
        return "Invalid JSON body"

    for error in errors:
        # Absent, null and empty required values all count as missing
        if error["type"] in ("missing", "string_too_short") or error.get("input") is None:
            return "Missing required fields"

    location = errors[0]["loc"] if errors else ()
    field = location[-1] if location else "request"
    return f"Invalid value for {field}"


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as {"error": <message>}."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": validation_message(exc.errors())},
        )

    @app.exception_handler(DatabaseError)
    async def database_exception_handler(request: Request, exc: DatabaseError):
        logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The database handle is owned by the application: it is opened and
    bootstrapped before the first request is served and closed on shutdown.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for startup and shutdown events.
        """
        # Startup
        logger.info("Starting up application...")
        database = app.state.database.open()
        bootstrap(database, seed=settings.SEED_SAMPLE_DATA)

        yield

        # Shutdown
        logger.info("Shutting down application...")
        database.close()

    app = FastAPI(
        title=settings.APP_NAME,
        description="""
    A basic inventory-management API:

    - **Products**: create, list, fetch, replace and delete products
    - **Stats**: product count, units in stock, categories and stock value
    - **Static assets**: files under the static directory are served at `/`
    """,
        version=settings.APP_VERSION,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.database = Database(settings.DATABASE_URL)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routers
    app.include_router(health.router, prefix="/api")
    app.include_router(products.router, prefix="/api")
    app.include_router(stats.router, prefix="/api")

    # Static files catch every path not claimed by the API
    if os.path.isdir(settings.STATIC_DIR):
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
    else:
        logger.warning("Static directory %s not found; static assets disabled", settings.STATIC_DIR)

    return app


configure_logging(get_settings().LOG_LEVEL)

# Create FastAPI application
app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
