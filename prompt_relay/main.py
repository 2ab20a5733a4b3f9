from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from prompt_relay.config import get_settings
from prompt_relay.handlers.analyze_handler import create_router, error_response, missing_image_response

logger = logging.getLogger(__name__)

ANALYZE_PATH = "/analyze-image"
IMAGE_FIELD = "imageFile"


def create_app(*, route_path: str = ANALYZE_PATH, static_dir: str | None = None) -> FastAPI:
    """Build the relay app.

    Deployment variants differ only in where the analyze route lives and
    whether the frontend is served from the same process.
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title="Image Prompt Relay")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        # A text part named imageFile is the same as no upload at all
        if any(tuple(err.get("loc", ()))[:2] == ("body", IMAGE_FIELD) for err in exc.errors()):
            return missing_image_response()
        return await request_validation_exception_handler(request, exc)

    # Last resort only: runs outside CORSMiddleware
    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s: %s", request.url.path, exc)
        return error_response(exc)

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    app.include_router(create_router(route_path))

    # Mounted last so the API routes take precedence over "/"
    if static_dir:
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


app = create_app(static_dir=get_settings().static_dir)


def run() -> None:  # pragma: no cover
    settings = get_settings()
    logger.info("Server listening on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":  # pragma: no cover
    run()
