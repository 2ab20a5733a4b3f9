from __future__ import annotations

from .base import LLMProvider
from .registry import get_provider, provider_factory

__all__ = [
    "LLMProvider",
    "get_provider",
    "provider_factory",
]
