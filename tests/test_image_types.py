from __future__ import annotations

from prompt_relay.utils.image_types import resolve_mime_type


def test_declared_type_is_kept(png_bytes):
    assert resolve_mime_type(png_bytes, "image/jpeg") == "image/jpeg"


def test_missing_type_is_sniffed(png_bytes, jpeg_bytes):
    assert resolve_mime_type(png_bytes, None) == "image/png"
    assert resolve_mime_type(jpeg_bytes, "application/octet-stream") == "image/jpeg"


def test_unknown_bytes_keep_declared_value():
    assert resolve_mime_type(b"not an image", None) == "application/octet-stream"
    assert resolve_mime_type(b"not an image", "application/octet-stream") == "application/octet-stream"
