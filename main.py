"""
Crustaceans API - Main Application Entry Point
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.api.core.logger import setup_logging
from app.api.v1.routes import crustaceans
from app.api.db.database import init_db
from app.api.utils.exceptions import CrustaceanServiceException
from app.api.utils.handlers import (
    crustacean_service_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from config import settings

setup_logging()
logger = logging.getLogger("app")

SUB_GROUPS = ["Lobster", "Prawn", "Shrimp"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown events.

    Args:
        app (FastAPI): FastAPI application instance

    Yields:
        None
    """
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    try:
        await init_db()
        logger.info("Database initialization completed")
    except Exception as e:
        logger.error(f"Database initialization failed: {str(e)}", exc_info=True)
        raise

    yield

    logger.info(f"Shutting down {settings.APP_NAME}")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="CRUD API for crustacean species with filtering and pagination",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL, settings.DEV_URL, settings.APP_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(CrustaceanServiceException, crustacean_service_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint for service monitoring.

    Returns:
        dict: Service status and version information
    """
    return {
        "success": True,
        "status": "healthy",
        "message": f"{settings.APP_NAME} is running",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint providing API information.

    Returns:
        dict: API name, endpoints and documentation links
    """
    prefix = f"{settings.API_V1_PREFIX}/crustaceans"
    return {
        "success": True,
        "message": f"Welcome to the {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "redoc": "/redoc",
        "endpoints": {
            "GET /health": "Health check",
            f"GET {prefix}": "List crustaceans (filters: group, subGroup, limit, page)",
            f"GET {prefix}/{{id}}": "Get crustacean by ID",
            f"POST {prefix}": "Create new crustacean",
            f"PUT {prefix}/{{id}}": "Update crustacean",
            f"DELETE {prefix}/{{id}}": "Delete crustacean",
        },
        "availableSubGroups": SUB_GROUPS,
    }

app.include_router(crustaceans.router, prefix=settings.API_V1_PREFIX)

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting server on 0.0.0.0:{settings.APP_PORT}")
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.APP_PORT,
        reload=settings.DEBUG,
        log_config=None,
    )
