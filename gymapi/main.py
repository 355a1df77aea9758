"""
FastAPI application factory.

Creates and configures the FastAPI application instance and maps domain
errors to HTTP responses.
"""

import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gymapi.api.v1.router import api_router
from gymapi.core.config import settings
from gymapi.core.exceptions import (AuthenticationError, ConflictError, ForbiddenError, GymError, InvalidRoleError,
                                    NotFoundError, ValidationError, )
from gymapi.core.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

# Checked in order, first match wins
ERROR_STATUS = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidRoleError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
]

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.DEBUG else settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


def status_for(exc: GymError) -> int:
    for error_class, code in ERROR_STATUS:
        if isinstance(exc, error_class):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(code: str, message: str, details=None) -> dict:
    return {"error": code, "detail": message, "details": details or []}


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing information."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    logger.info(
        f"{request.method} {request.url.path} - {response.status_code}",
        extra={
            "extra_fields": {
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "process_time_ms": round(process_time * 1000, 2),
            }
        }
    )
    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.exception_handler(GymError)
async def gym_error_handler(request: Request, exc: GymError):
    code = status_for(exc)
    headers = {"WWW-Authenticate": "Bearer"} if code == status.HTTP_401_UNAUTHORIZED else None
    if code >= 500:
        logger.error(f"Unmapped domain error: {exc.error_code}", exc_info=exc)
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.error_code} {exc.message}")
    return JSONResponse(status_code=code, content=error_body(exc.error_code, exc.message, exc.details),
                        headers=headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies and parameters are reported as 400, not 422."""
    details = [
        {"field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
         "message": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST,
                        content=error_body(ValidationError.error_code, "Validation failed", details))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(
        f"Unhandled exception: {exc}",
        exc_info=exc,
        extra={
            "extra_fields": {
                "method": request.method,
                "path": request.url.path,
            }
        }
    )
    message = "Internal server error" if settings.is_production else str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                        content=error_body("INTERNAL_ERROR", message))


# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "gym-api",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "description": settings.DESCRIPTION,
        "docs": "/docs",
    }
