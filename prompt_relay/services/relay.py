"""Image-to-prompt relay core.

Turns one uploaded image plus the two form selectors into the JSON payload
returned to the frontend. Transport concerns (multipart parsing, status
codes, CORS) live in :mod:`prompt_relay.handlers.analyze_handler`; this
module only raises.
"""
from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from prompt_relay.models import RawPromptResponse, RequestMode, StructuredPrompt, UploadedImage
from prompt_relay.services.llm import LLMProvider
from prompt_relay.services.prompts import build_prompt

logger = logging.getLogger(__name__)

JSON_FENCE = "```json"
FENCE = "```"


class RelayError(Exception):
    """Base class for failures raised by the relay core."""


class MissingImageError(RelayError):
    """Raised when the request carries no image, or an empty one."""


class ModelResponseError(RelayError):
    """Raised when the model's text cannot be turned into the structured payload."""


def strip_json_fence(text: str) -> str:
    """Remove a leading ```json fence and everything from the last ``` onward.

    Text that does not start with the fence is returned trimmed but otherwise
    untouched.
    """

    cleaned = text.strip()
    if not cleaned.startswith(JSON_FENCE):
        return cleaned
    end = cleaned.rfind(FENCE)
    if end < len(JSON_FENCE):
        raise ModelResponseError("Model response opens a ```json fence but never closes it")
    return cleaned[len(JSON_FENCE):end].strip()


def _reject_constant(name: str) -> Any:
    raise ModelResponseError(f"Model returned a non-JSON constant: {name}")


def parse_structured_output(text: str, *, strict: bool = False) -> Any:
    """Parse the model's structured-mode reply.

    The parsed value is returned as-is. With *strict* it must additionally
    validate against :class:`StructuredPrompt`.
    """

    body = strip_json_fence(text)
    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ModelResponseError(f"Model returned invalid JSON: {exc}") from exc

    if strict:
        try:
            StructuredPrompt.model_validate(payload)
        except ValidationError as exc:
            raise ModelResponseError(f"Model output does not match the prompt schema: {exc}") from exc
    return payload


def analyze_image(
    image: UploadedImage | None,
    selected_lang: str | None,
    selected_ratio: str | None,
    provider: LLMProvider,
    *,
    default_language: str,
    strict_schema: bool = False,
) -> Any:
    """Run one image through the model and shape the reply.

    Returns ``{"finalPrompt": text}`` in raw mode, otherwise the parsed JSON
    produced by the model.
    """

    if image is None or not image.data:
        raise MissingImageError("No image uploaded")

    mode = RequestMode.from_selector(selected_lang)
    language = mode.output_language(default_language)
    prompt = build_prompt(raw=mode.is_raw, language=language, ratio=selected_ratio or "")
    logger.info("Analyzing image: mode=%s ratio=%r", mode.value, selected_ratio)

    text = provider.describe_image(image, prompt)

    if mode.is_raw:
        return RawPromptResponse(finalPrompt=text).model_dump()
    return parse_structured_output(text, strict=strict_schema)
