from __future__ import annotations

import io

from fastapi import FastAPI
from fastapi.testclient import TestClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from PIL import Image

from prompt_relay.config import Settings, get_settings
from prompt_relay.main import create_app
from prompt_relay.services.llm import LLMProvider, provider_factory


class FakeProvider(LLMProvider):
    """Provider backed by a canned chat model; records every call."""

    name = "fake"

    def __init__(self, *responses: str, error: Exception | None = None) -> None:
        super().__init__()
        self.responses = list(responses) or [""]
        self.error = error
        self.calls: list[tuple] = []

    def build_llm(self):
        return FakeListChatModel(responses=self.responses)

    def describe_image(self, image, prompt):
        self.calls.append((image, prompt))
        if self.error is not None:
            raise self.error
        return super().describe_image(image, prompt)


def image_bytes(fmt: str = "JPEG") -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (8, 8), color=(200, 30, 30)).save(buf, format=fmt)
    return buf.getvalue()


def override_provider(app: FastAPI, provider: LLMProvider, settings: Settings) -> None:
    app.dependency_overrides[provider_factory] = lambda: (lambda: provider)
    app.dependency_overrides[get_settings] = lambda: settings


def make_client(provider: LLMProvider, settings: Settings, *, route_path: str = "/analyze-image") -> TestClient:
    app = create_app(route_path=route_path)
    override_provider(app, provider, settings)
    return TestClient(app)
