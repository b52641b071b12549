# privachat/main.py
import os
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from privachat import __version__
from privachat.api import health, profile, stats
from privachat.config import Settings, settings as default_settings
from privachat.exceptions import LedgerError, StorageUnavailable, ValidationError
from privachat.services.database_service import DatabaseService
from privachat.services.profile_service import ProfileService
from privachat.services.rate_limiter import FixedWindowRateLimiter
from privachat.services.stats_service import StatsService
from privachat.utils.logger import setup_logger

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logger = setup_logger(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("PrivaChat API starting")
        logger.info(f"Database: {settings.database_url}")

        database = DatabaseService(settings.database_url, echo=settings.database_echo)
        await database.create_tables()
        app.state.database = database
        app.state.profile_service = ProfileService(database)
        app.state.stats_service = StatsService(database, settings.allow_negative_increments)

        yield

        logger.info("Shutting down gracefully...")
        await database.close()

    app = FastAPI(
        title="PrivaChat API",
        description="Profiles and XP / message / call stats for PrivaChat users",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    if settings.rate_limit_enabled:
        limiter = FixedWindowRateLimiter(settings.rate_limit_max_requests, settings.rate_limit_window_seconds)
        app.state.rate_limiter = limiter

        @app.middleware("http")
        async def rate_limit_api(request: Request, call_next):
            if request.url.path.startswith("/api"):
                client = request.client.host if request.client else "unknown"
                if not limiter.hit(client):
                    logger.warning(f"Rate limit exceeded: {client}")
                    return PlainTextResponse(
                        RATE_LIMIT_MESSAGE,
                        status_code=429,
                        headers={"Retry-After": str(limiter.retry_after(client))},
                    )
            return await call_next(request)

    # Outermost: wraps the limiter
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(LedgerError)
    async def ledger_error_handler(_request: Request, exc: LedgerError):
        if isinstance(exc, StorageUnavailable):
            return JSONResponse(status_code=exc.status_code, content={"error": "Internal server error"})
        content = {"error": exc.message}
        if isinstance(exc, ValidationError):
            content["field"] = exc.field
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(_request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if not errors:
            return JSONResponse(status_code=400, content={"error": "Invalid request"})
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid request: {location}: {first.get('msg')}" if location else f"Invalid request: {first.get('msg')}"
        return JSONResponse(status_code=400, content={"error": message[:200]})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(_request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    app.include_router(profile.router, prefix="/api")
    app.include_router(stats.router, prefix="/api")
    app.include_router(health.router, prefix="/api")

    # Front end is optional; mounted last so /api routes win
    if settings.static_dir:
        if os.path.isdir(settings.static_dir):
            app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
        else:
            logger.warning(f"Static directory not found, front end not served: {settings.static_dir}")

    return app


app = create_app()


def run():
    uvicorn.run(
        "privachat.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
        log_level=default_settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
