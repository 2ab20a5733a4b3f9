from __future__ import annotations

import logging

from langchain_google_genai import ChatGoogleGenerativeAI

from prompt_relay.config import get_settings

from .base import LLMProvider, optional_client_kwargs

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    name = "gemini"

    def build_llm(self) -> ChatGoogleGenerativeAI:
        settings = get_settings()
        if not settings.gemini_api_key:
            raise ValueError("GEMINI_API_KEY is not set")

        logger.info("Gemini provider: model=%s", settings.gemini_model)
        return ChatGoogleGenerativeAI(
            model=settings.gemini_model,
            google_api_key=settings.gemini_api_key,
            max_retries=0,
            **optional_client_kwargs(settings),
        )
