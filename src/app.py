"""Main FastAPI application module.

This module initializes the FastAPI application, registers all route handlers
and maps every error to the ``{"message": ...}`` response envelope.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.database import init_db
from core.exceptions import CampusError
from core.logging_config import setup_logging
from config import (
    CORS_ALLOWED_ORIGINS,
    API_HOST,
    API_PORT,
    IDENTITY_MODE,
)
from api.routes import announcements, assignments, courses, events, grievances
from api.routes import lost_found, research, study_materials, users

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Initialize FastAPI application
app = FastAPI(
    title="Campus Portal API",
    description="Role-based campus management backend.",
    version="1.0.0",
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register route handlers
app.include_router(users.router)
app.include_router(courses.router)
app.include_router(study_materials.router)
app.include_router(assignments.router)
app.include_router(events.router)
app.include_router(announcements.router)
app.include_router(grievances.router)
app.include_router(lost_found.router)
app.include_router(research.router)


# --- Error envelope ---


@app.exception_handler(CampusError)
def handle_campus_error(request: Request, exc: CampusError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(StarletteHTTPException)
def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report the first invalid field as ``"<field>: <reason>"``."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        # Drop the "body"/"query" prefix from the location
        location = [str(part) for part in first.get("loc", ())[1:]]
        field = ".".join(location) or "request"
        message = f"{field}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"message": message})


@app.exception_handler(SQLAlchemyError)
def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Server error"})


@app.exception_handler(Exception)
def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Server error"})


@app.on_event("startup")
def startup_tasks() -> None:
    """Create missing tables before serving requests."""
    init_db()
    logger.info("Campus Portal API ready (identity mode: %s)", IDENTITY_MODE)


@app.get("/", summary="API root", tags=["Info"])
def root() -> dict:
    """API root path, returning API information and documentation links.

    Returns:
        Dictionary with API information and documentation links.
    """
    return {
        "name": "Campus Portal API",
        "version": "1.0.0",
        "description": "Role-based campus management backend.",
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc",
        },
        "health": "/api/health",
    }


@app.get("/api/health", summary="Health check", tags=["Health"])
def health() -> dict:
    """Health check endpoint.

    Returns:
        Dictionary with status "ok".
    """
    return {"status": "ok"}


# --- Startup code for direct execution ---
if __name__ == "__main__":
    import uvicorn

    server_url = f"http://{API_HOST}:{API_PORT}"
    print(f"Campus Portal API: {server_url}")
    print(f"API docs: {server_url}/docs")
    print()

    # reload=True enables auto-reload on code changes
    uvicorn.run("app:app", host=API_HOST, port=API_PORT, reload=True)
