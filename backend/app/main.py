"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import horses_router, images_router, owners_router
from app.config import get_settings
from app.database import AsyncSessionLocal, init_db
from app.datagen import seed
from app.exceptions import (
    ConflictError,
    FatalInconsistencyError,
    NotFoundError,
    ValidationError,
)
from app.schemas import ErrorResponse

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    await init_db()
    if settings.seed_test_data:
        async with AsyncSessionLocal() as session:
            await seed(session)
            await session.commit()
    yield


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Horse breeding registry",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _log_client_error(request: Request, status: int, exc: Exception) -> None:
    logger.warning(
        "%s %s %s: %s: %s",
        status,
        request.method,
        request.url.path,
        type(exc).__name__,
        exc,
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    _log_client_error(request, 422, exc)
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(detail=exc.message, errors=exc.errors).model_dump(),
    )


@app.exception_handler(ConflictError)
async def conflict_error_handler(request: Request, exc: ConflictError):
    _log_client_error(request, 409, exc)
    return JSONResponse(
        status_code=409,
        content=ErrorResponse(detail=exc.message, errors=exc.errors).model_dump(),
    )


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    _log_client_error(request, 404, exc)
    return JSONResponse(
        status_code=404,
        content=ErrorResponse(detail=exc.message).model_dump(),
    )


@app.exception_handler(FatalInconsistencyError)
async def fatal_error_handler(request: Request, exc: FatalInconsistencyError):
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(detail="Internal data inconsistency").model_dump(),
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


# Register API routers
app.include_router(horses_router, prefix="/api")
app.include_router(owners_router, prefix="/api")
app.include_router(images_router, prefix="/api")
