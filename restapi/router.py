"""Application configuration and router setup."""

from contextlib import asynccontextmanager
from typing import Optional

import fastapi
import httpx
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware import cors
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from components.chat.client import ChatCompletionClient
from components.core import init_db
from components.core.config import Settings, get_settings
from components.core.errors import ConfigurationError, KodBankError
from components.core.logging_config import get_logger, setup_logging
from restapi.endpoints import auth, balance, chat, health_check

TITLE = "KodBank API"
DESCRIPTION = "Demo banking API with cookie sessions and an AI chat proxy"
VERSION = "1.0.0"

logger = get_logger("app")


async def kodbank_error_handler(request: Request, exc: KodBankError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request payload"},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    yield
    await app.state.db_manager.dispose()


def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[AsyncEngine] = None,
    chat_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> fastapi.FastAPI:
    """Create and configure the FastAPI application.

    Raises ConfigurationError when no token signing secret is configured.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    if not settings.JWT_SECRET:
        logger.critical("JWT_SECRET is not defined")
        raise ConfigurationError("JWT_SECRET is not defined")

    app = fastapi.FastAPI(
        title=TITLE,
        description=DESCRIPTION,
        version=VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Initialize database
    init_db.init_db(app, settings, engine=engine)
    app.state.chat_client = ChatCompletionClient(settings, transport=chat_transport)

    # Add CORS middleware
    app.add_middleware(
        cors.CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.add_exception_handler(KodBankError, kodbank_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include routers
    app.include_router(health_check.router)
    app.include_router(auth.router)
    app.include_router(balance.router)
    app.include_router(chat.router)

    return app
