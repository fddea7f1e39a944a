"""
FastAPI application for the movie catalog front-end.

Serves page-ready carousels, the genre menu and the search route
contracts as JSON.
"""

import time
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import get_config
from api.exceptions import APIError, api_error_handler
from api.logging_config import (
    REQUEST_ID_HEADER,
    bind_request_id,
    current_request_id,
    logger,
    reset_request_id,
)
from api.routers import genres, home, search


def cors_options(allowed_origins: List[str]) -> Dict[str, Any]:
    """CORS settings for the configured origins. No origins means any origin, no credentials."""
    return {
        "allow_origins": list(allowed_origins) or ["*"],
        "allow_credentials": bool(allowed_origins),
        "allow_methods": ["GET", "POST"],
        "allow_headers": ["*"],
        "expose_headers": [REQUEST_ID_HEADER],
    }


app = FastAPI(
    title="TMDB Catalog API",
    description="Catalog integration layer for the movie browsing front-end",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_exception_handler(APIError, api_error_handler)

app.add_middleware(CORSMiddleware, **cors_options(get_config().allowed_origins))


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Log all HTTP requests with timing and response status."""
    token = bind_request_id(request.headers.get(REQUEST_ID_HEADER))
    try:
        return await _timed(request, call_next)
    finally:
        reset_request_id(token)


async def _timed(request: Request, call_next):
    skip_paths = {"/health", "/", "/api/docs", "/api/redoc", "/api/openapi.json"}
    if request.url.path in skip_paths:
        return await call_next(request)

    start_time = time.time()

    try:
        response = await call_next(request)
    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        logger.error(
            f"Request failed: {request.method} {request.url.path} "
            f"duration={duration_ms:.2f}ms error={e}"
        )
        raise

    duration_ms = (time.time() - start_time) * 1000
    log_msg = (
        f"{request.method} {request.url.path} "
        f"status={response.status_code} duration={duration_ms:.2f}ms"
    )
    if response.status_code >= 500:
        logger.error(log_msg)
    elif response.status_code >= 400:
        logger.warning(log_msg)
    else:
        logger.info(log_msg)

    response.headers[REQUEST_ID_HEADER] = current_request_id()
    return response


app.include_router(home.router, prefix="/api/v1", tags=["Home"])
app.include_router(genres.router, prefix="/api/v1", tags=["Genres"])
app.include_router(search.router, prefix="/api/v1", tags=["Search"])


@app.get("/", include_in_schema=False)
async def root():
    return {
        "message": "TMDB Catalog API",
        "docs": "/api/docs",
    }


@app.get("/health", include_in_schema=False)
async def health():
    """Simple health check endpoint."""
    return {"status": "ok"}
