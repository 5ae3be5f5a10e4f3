"""
FastAPI Main Application

Mentors Real Estate lead-management REST API and page server.
"""
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import Settings, settings as default_settings
from src import __version__
from src.mentors.api.dependencies import get_database
from src.mentors.api.schemas import HealthCheck
from src.mentors.api.routers import auth, users, developers, availability, leads
from src.mentors.db.session import Database
from src.mentors.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

COPYRIGHT_HEADER = "X-App-Copyright"


def create_app(app_settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the environment-loaded singleton)
        database: Pre-built Database handle; one is created from settings at startup if omitted

    Returns:
        Configured FastAPI app
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or Database(app_settings)
        db.initialize()
        app.state.db = db
        logger.info("application_started", admin_path=app_settings.admin_path)
        try:
            yield
        finally:
            db.dispose()
            logger.info("application_stopped")

    app = FastAPI(
        title="Mentors Real Estate API",
        description="Users, developers, availability listings and customer leads",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    register_error_handlers(app)

    @app.middleware("http")
    async def add_copyright_header(request: Request, call_next):
        response = await call_next(request)
        response.headers[COPYRIGHT_HEADER] = app_settings.copyright_notice
        return response

    # Include routers
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(developers.router)
    app.include_router(availability.router)
    app.include_router(leads.router)

    register_pages(app, app_settings)

    @app.get("/health", response_model=HealthCheck, tags=["health"])
    def health_check(db: Database = Depends(get_database)):
        """
        Health check endpoint.

        Returns:
            Health status with database connectivity check
        """
        connected = db.health_check()
        return HealthCheck(
            status="healthy" if connected else "degraded",
            version=__version__,
            database="connected" if connected else "error",
            timestamp=datetime.utcnow(),
        )

    return app


def register_error_handlers(app: FastAPI):
    """Render every failure as the {"error": message} envelope."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info("request_validation_failed", path=request.url.path, errors=len(exc.errors()))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request."},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error."},
        )


def register_pages(app: FastAPI, app_settings: Settings):
    """Serve the static HTML pages. The admin page lives at a configurable path."""
    static_dir = app_settings.static_dir

    @app.get("/", include_in_schema=False)
    def index_page():
        return FileResponse(static_dir / "index.html")

    @app.get("/filter", include_in_schema=False)
    def filter_page():
        return FileResponse(static_dir / "filter.html")

    @app.get("/admin", include_in_schema=False)
    def hidden_admin_page():
        return PlainTextResponse("Not Found", status_code=status.HTTP_404_NOT_FOUND)

    @app.get(f"/{app_settings.admin_path}", include_in_schema=False)
    def admin_page():
        return FileResponse(static_dir / "admin.html")


app = create_app()


def main():
    """Run the API with uvicorn on the configured host and port."""
    import uvicorn

    logger.info(
        "server_starting",
        url=f"http://localhost:{default_settings.port}",
        admin_page=f"http://localhost:{default_settings.port}/{default_settings.admin_path}",
    )
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    main()
