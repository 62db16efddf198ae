import os
import logging
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI, APIRouter
import uvicorn
from contextlib import asynccontextmanager

from grabpic.core.config import settings
from grabpic.core.exceptions import (
    GrabPicError,
    general_exception_handler,
    grabpic_exception_handler,
)
from grabpic.core.middleware import RequestLoggingMiddleware
from grabpic.presentation.api.v1.routers import health
from grabpic.presentation.api.v1.routers import photos


def configure_logging() -> None:
    """Log to console and to a rotating file under settings.log_file"""
    log_handlers = [logging.StreamHandler()]
    log_dir = os.path.dirname(settings.log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    log_handlers.append(
        RotatingFileHandler(
            settings.log_file, maxBytes=5 * 1024 * 1024, backupCount=2, encoding="utf-8"
        )
    )
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format=settings.log_format,
        datefmt=settings.log_date_format,
        handlers=log_handlers,
    )


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    configure_logging()
    logger.info("Starting GrabPic API...")
    yield
    logger.info("Shutting down GrabPic API...")


def create_application() -> FastAPI:
    """Create and configure FastAPI application"""

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(GrabPicError, grabpic_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Include API routers under versioned prefix
    api_v1 = APIRouter(prefix="/api/v1")
    api_v1.include_router(photos.router)
    api_v1.include_router(health.router)
    app.include_router(api_v1)

    return app


# Create application instance
app = create_application()

if __name__ == "__main__":
    dev_mode = os.getenv("DEV_MODE", "true").lower() == "true"
    uvicorn.run(
        "grabpic.presentation.main:app",
        host=settings.host,
        port=settings.port,
        reload=dev_mode,
    )
