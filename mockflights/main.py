"""
FastAPI Application - Mock Flights Service
Serves synthetic flight offers for the travel planner demo
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core import settings, FlightServiceError, InternalError
from .core.logging_config import configure_logging
from .api import api_router

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Mock flight search API generating randomized, route-aware offers",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FlightServiceError)
async def flight_service_error_handler(request: Request, exc: FlightServiceError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors, reported as 400."""
    errors = exc.errors()
    if not errors:
        message = "Invalid request"
    elif errors[0].get("type") == "json_invalid":
        message = "Invalid JSON body"
    else:
        first = errors[0]
        field = ".".join(
            str(part) for part in first.get("loc", ())
            if part != "body" and not isinstance(part, int)
        )
        message = f"Invalid request: {field} - {first.get('msg')}" if field else f"Invalid request: {first.get('msg')}"
    logger.info("Rejected request to %s: %s", request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": InternalError().message}
    )


# Include API router
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/", tags=["root"])
async def root():
    """Root endpoint"""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health"
    }


@app.get("/health", tags=["health"])
async def health():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "mockflights.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
