"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import DBAPIError

from mycap.api import auth, groups, users
from mycap.api.responses import error_envelope
from mycap.config import get_settings
from mycap.database import SessionLocal, init_db
from mycap.errors import MyCapError, UnauthorizedError
from mycap.services.user_service import seed_user_types

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.seed_user_types_on_startup:
        init_db()
        db = SessionLocal()
        try:
            seed_user_types(db)
        finally:
            db.close()
    yield


app = FastAPI(
    title="MyCap API",
    description="Backend for time-limited group chats and conferences",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        f"[{request.method}] {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
    )
    return response


@app.exception_handler(MyCapError)
async def mycap_error_handler(request: Request, exc: MyCapError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return error_envelope(exc.message, exc.status_code, headers=headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as a 400 envelope."""
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in errors
    )
    return error_envelope(message or "Invalid request.", status.HTTP_400_BAD_REQUEST)


@app.exception_handler(DBAPIError)
async def database_error_handler(request: Request, exc: DBAPIError):
    """Store failures outside a commit (reads, connects) surface as 503."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return error_envelope("Data store is unavailable.", status.HTTP_503_SERVICE_UNAVAILABLE)


# Register routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(groups.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
