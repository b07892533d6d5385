"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from answer_scoring.api.routes import trials
from answer_scoring.config import settings
from answer_scoring.core.exceptions import InvalidArgumentError
from answer_scoring.middleware.request_id import RequestIDMiddleware, current_request_id
from answer_scoring.models.envelope import ApiError, error_response

logger = logging.getLogger(__name__)

# Configure logging format based on dev_mode
if not settings.dev_mode:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='{"time":"%(asctime)s","level":"%(levelname)s","name":"%(name)s","message":"%(message)s"}',
    )
else:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

app = FastAPI(
    title="Typed Answer Scoring API",
    description="Edit-distance scoring of typed card names",
    version="0.1.0",
    openapi_url="/api/v1/openapi.json",
    docs_url="/docs" if settings.dev_mode else None,
    redoc_url="/redoc" if settings.dev_mode else None,
)

# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------

app.add_middleware(RequestIDMiddleware)


# ---------------------------------------------------------------------------
# Global exception handlers
# ---------------------------------------------------------------------------

@app.exception_handler(InvalidArgumentError)
async def _invalid_argument_handler(_request: Request, exc: InvalidArgumentError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content=error_response(
            [ApiError(code="INVALID_ARGUMENT", message=str(exc), field=exc.field)],
            request_id=current_request_id(),
        ),
    )


@app.exception_handler(RequestValidationError)
async def _validation_error_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        ApiError(
            code="VALIDATION_ERROR",
            message=err["msg"],
            field=".".join(map(str, err["loc"][1:])) or None,
        )
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content=error_response(errors, request_id=current_request_id()),
    )


@app.exception_handler(StarletteHTTPException)
async def _http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(
            [ApiError(code=f"HTTP_{exc.status_code}", message=str(exc.detail))],
            request_id=current_request_id(),
        ),
    )


@app.exception_handler(Exception)
async def _global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Runs outside RequestIDMiddleware; the id survives on the request state.
    request_id = getattr(request.state, "request_id", None) or current_request_id()
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=True)
    detail = str(exc) if settings.dev_mode else "Internal server error"
    return JSONResponse(
        status_code=500,
        content=error_response(
            [ApiError(code="INTERNAL_ERROR", message=detail)],
            request_id=request_id,
        ),
        headers={"X-Request-ID": request_id},
    )


# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "Accept"],
)


# ---------------------------------------------------------------------------
# Routers, all under /api/v1/
# ---------------------------------------------------------------------------

app.include_router(trials.router, prefix="/api/v1/trials", tags=["trials"])

# ---------------------------------------------------------------------------
# System endpoints
# ---------------------------------------------------------------------------


@app.get("/health")
async def health_check() -> dict:
    """Liveness check: verifies the API process is alive."""
    return {
        "status": "healthy",
        "scoring": {
            "distance_threshold": settings.distance_threshold,
            "near_miss_margin": settings.near_miss_margin,
            "near_miss_associated": settings.near_miss_associated,
        },
    }


@app.get("/api/v1/version")
async def version() -> dict:
    """Return build / version metadata."""
    return {
        "version": app.version,
        "title": app.title,
        "api_prefix": "/api/v1",
    }


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {"message": "Typed Answer Scoring API", "docs": "/docs"}
