# src/chirpy/main.py
"""Main entry point for the Chirpy application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from chirpy.api.v1 import auth_router, posts_router, users_router, webhooks_router
from chirpy.core.errors import ChirpyError
from chirpy.core.logging_config import setup_logging
from chirpy.core.settings import settings

logger = logging.getLogger(__name__)

setup_logging(settings.log_level)

app = FastAPI(
    title="Chirpy API",
    description="Short posts with email/password accounts",
    version=settings.app_version,
)

app.include_router(auth_router, prefix="/api/v1")
app.include_router(posts_router, prefix="/api/v1")
app.include_router(users_router, prefix="/api/v1")
app.include_router(webhooks_router, prefix="/api/v1")


@app.exception_handler(ChirpyError)
async def chirpy_error_handler(request: Request, exc: ChirpyError) -> JSONResponse:
    """Translate core failures into their HTTP status and a JSON envelope."""
    if exc.http_status >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    else:
        logger.info("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if exc.http_status == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=exc.http_status, content=exc.to_response(), headers=headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 with field-level detail."""
    logger.info("Validation error on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "validation_error",
                "message": "Invalid request data",
                "details": [
                    {
                        "field": ".".join(str(loc) for loc in err["loc"]),
                        "message": err["msg"],
                    }
                    for err in exc.errors()
                ],
            },
        },
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("chirpy.main:app", host="0.0.0.0", port=8080, reload=settings.debug)
