#!/usr/bin/env python
"""Script to run a local image through the relay with the configured provider."""
from __future__ import annotations

import argparse
import json
import mimetypes
import sys
from pathlib import Path

from prompt_relay.config import get_settings
from prompt_relay.models import UploadedImage
from prompt_relay.services.llm import get_provider
from prompt_relay.services.relay import analyze_image
from prompt_relay.utils.image_types import resolve_mime_type


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate an image-generator prompt from a picture")
    parser.add_argument("image", type=Path)
    parser.add_argument("--lang", default="ID", help="Selector, e.g. ID, EN, ID-RAW, EN-RAW")
    parser.add_argument("--ratio", default="1:1")
    args = parser.parse_args()

    data = args.image.read_bytes()
    declared, _ = mimetypes.guess_type(args.image.name)
    image = UploadedImage(data=data, mime_type=resolve_mime_type(data, declared))

    settings = get_settings()
    result = analyze_image(
        image,
        args.lang,
        args.ratio,
        get_provider(),
        default_language=settings.default_output_language,
        strict_schema=settings.strict_schema,
    )
    json.dump(result, sys.stdout, ensure_ascii=False, indent=2)
    print()


if __name__ == "__main__":
    main()
