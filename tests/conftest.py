from __future__ import annotations

import pytest

from helpers import image_bytes
from prompt_relay.config import Settings


@pytest.fixture
def jpeg_bytes():
    return image_bytes("JPEG")


@pytest.fixture
def png_bytes():
    return image_bytes("PNG")


@pytest.fixture
def settings():
    return Settings(DEFAULT_OUTPUT_LANGUAGE="Bahasa Indonesia", STRICT_SCHEMA=False)
