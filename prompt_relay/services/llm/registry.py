from __future__ import annotations

from functools import lru_cache
from typing import Callable

from prompt_relay.config import get_settings

from .base import LLMProvider
from .gemini_provider import GeminiProvider
from .openai_provider import OpenAIProvider

_PROVIDERS: dict[str, type[LLMProvider]] = {
    "gemini": GeminiProvider,
    "openai": OpenAIProvider,
}


@lru_cache()
def get_provider() -> LLMProvider:
    settings = get_settings()
    provider_key = settings.llm_provider.lower()
    if provider_key not in _PROVIDERS:
        raise ValueError(f"Unsupported LLM provider: {provider_key}")
    return _PROVIDERS[provider_key]()


def provider_factory() -> Callable[[], LLMProvider]:
    """Request dependency handing out the provider lookup itself.

    The lookup runs inside the handler's error boundary, so a bad
    ``LLM_PROVIDER`` yields the normal error envelope.
    """
    return get_provider
