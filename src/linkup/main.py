"""FastAPI application entrypoint for LinkUp."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import api_router
from .core.config import get_settings
from .core.database import SessionLocal, engine
from .core.errors import Internal, ServiceError
from .core.logging import configure_logging
from .jobs import register_scheduler
from .schemas import ErrorResponse
from .services.bootstrap_service import bootstrap

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    code: {"model": ErrorResponse}
    for code in (
        status.HTTP_400_BAD_REQUEST,
        status.HTTP_401_UNAUTHORIZED,
        status.HTTP_403_FORBIDDEN,
        status.HTTP_404_NOT_FOUND,
        status.HTTP_409_CONFLICT,
    )
}


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        detail = exc.detail
        if exc.status_code == status.HTTP_404_NOT_FOUND and detail == "Not Found":
            detail = "Endpoint not found"
        return JSONResponse(status_code=exc.status_code, content={"error": detail}, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": _validation_message(exc)})

    # Routers translate service errors themselves; this covers any that escape.
    @app.exception_handler(ServiceError)
    async def service_error(request: Request, exc: ServiceError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        error = Internal("Internal server error")
        return JSONResponse(status_code=error.status_code, content={"error": error.detail})


def _register_bootstrap(app: FastAPI) -> None:
    settings = get_settings()
    if not settings.bootstrap_on_startup:
        return

    @app.on_event("startup")
    def bootstrap_database() -> None:
        with SessionLocal() as session:
            bootstrap(
                engine,
                session,
                admin_email=settings.admin_email,
                admin_password=settings.admin_password,
            )
            session.commit()
        logger.info("database bootstrap complete")


def create_app() -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="LinkUp API", version="0.1.0")
    _register_exception_handlers(app)
    app.include_router(api_router, prefix="/api/v1", responses=ERROR_RESPONSES)
    _register_bootstrap(app)
    register_scheduler(app)
    return app


app = create_app()
