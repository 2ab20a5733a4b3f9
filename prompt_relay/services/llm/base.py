from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage

from prompt_relay.config import Settings
from prompt_relay.models import UploadedImage

logger = logging.getLogger(__name__)


class LLMProvider(ABC):
    """Abstract interface for a multimodal language-model provider."""

    name: str = "abstract"

    def __init__(self) -> None:
        self._llm: BaseChatModel | None = None

    @abstractmethod
    def build_llm(self) -> BaseChatModel:
        """Construct the underlying chat model. Called lazily on first use."""

    @property
    def llm(self) -> BaseChatModel:
        if self._llm is None:
            self._llm = self.build_llm()
        return self._llm

    def describe_image(self, image: UploadedImage, prompt: str) -> str:
        """Send one image plus one text prompt and return the model's text.

        The call is made exactly once; clients are built without retries.
        """

        message = HumanMessage(
            content=[
                {"type": "image_url", "image_url": {"url": image.to_data_url()}},
                {"type": "text", "text": prompt},
            ]
        )
        logger.info(
            "Calling %s provider (mime=%s, bytes=%d)", self.name, image.mime_type, len(image.data)
        )
        response = self.llm.invoke([message])
        return _content_to_text(response.content)


def optional_client_kwargs(settings: Settings) -> dict[str, Any]:
    """Sampling/timeout options, only those explicitly configured."""

    kwargs: dict[str, Any] = {}
    if settings.llm_temperature is not None:
        kwargs["temperature"] = settings.llm_temperature
    if settings.llm_timeout_seconds is not None:
        kwargs["timeout"] = settings.llm_timeout_seconds
    return kwargs


def _content_to_text(content: Any) -> str:
    """Flatten a chat message content into plain text.

    Some providers return a list of content blocks instead of a string.
    """

    if isinstance(content, str):
        return content
    parts: list[str] = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)
