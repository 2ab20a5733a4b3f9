"""HTTP handler for the image analysis endpoint."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from prompt_relay.config import Settings, get_settings
from prompt_relay.models import (
    ErrorResponse,
    UploadedImage,
    ValidationErrorResponse,
)
from prompt_relay.services.llm import LLMProvider, provider_factory
from prompt_relay.services.relay import analyze_image
from prompt_relay.utils.image_types import resolve_mime_type

logger = logging.getLogger(__name__)

MISSING_IMAGE_MESSAGE = "Tidak ada file yang diunggah."
FALLBACK_ERROR_MESSAGE = "Gagal menganalisis gambar. Pastikan Kunci API valid dan terhubung."


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def error_response(exc: Exception) -> JSONResponse:
    """Generic failure envelope, surfacing the exception text when there is one."""
    message = str(exc) or FALLBACK_ERROR_MESSAGE
    return JSONResponse(status_code=500, content=ErrorResponse(code=500, message=message).model_dump())


def missing_image_response() -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=ValidationErrorResponse(error=MISSING_IMAGE_MESSAGE).model_dump(),
    )


async def read_upload(upload: UploadFile | None) -> UploadedImage | None:
    if upload is None:
        return None
    data = await upload.read()
    if not data:
        return None
    return UploadedImage(
        data=data,
        mime_type=resolve_mime_type(data, upload.content_type),
    )


# ---------------------------------------------------------------------------
# POST analyze
# ---------------------------------------------------------------------------


async def analyze(
    imageFile: Optional[UploadFile] = File(None),
    selectedLang: Optional[str] = Form(None),
    selectedRatio: Optional[str] = Form(None),
    get_llm: Callable[[], LLMProvider] = Depends(provider_factory),
    settings: Settings = Depends(get_settings),
):
    """Describe the uploaded image as an AI image-generator prompt."""
    image = await read_upload(imageFile)
    if image is None:
        return missing_image_response()

    try:
        provider = get_llm()
        result = await run_in_threadpool(
            analyze_image,
            image,
            selectedLang,
            selectedRatio,
            provider,
            default_language=settings.default_output_language,
            strict_schema=settings.strict_schema,
        )
        return JSONResponse(content=result)
    except Exception as exc:
        logger.exception("Model API error: %s", exc)
        return error_response(exc)


def create_router(path: str) -> APIRouter:
    """Router exposing :func:`analyze` at *path* (differs per deployment)."""
    router = APIRouter()
    router.add_api_route(
        path,
        analyze,
        methods=["POST"],
        responses={
            400: {"model": ValidationErrorResponse},
            500: {"model": ErrorResponse},
        },
    )
    return router
