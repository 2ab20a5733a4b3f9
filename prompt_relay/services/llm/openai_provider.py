from __future__ import annotations

import logging

from langchain_openai import ChatOpenAI

from prompt_relay.config import get_settings

from .base import LLMProvider, optional_client_kwargs

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    name = "openai"

    def build_llm(self) -> ChatOpenAI:
        settings = get_settings()
        if not settings.openai_api_key:
            raise ValueError("OPENAI_API_KEY is not set")

        logger.info("OpenAI provider: model=%s", settings.openai_model)
        return ChatOpenAI(
            model=settings.openai_model,
            api_key=settings.openai_api_key,
            max_retries=0,
            **optional_client_kwargs(settings),
        )
