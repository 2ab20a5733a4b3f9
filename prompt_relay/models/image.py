from __future__ import annotations

import base64

from pydantic import BaseModel, Field


class UploadedImage(BaseModel):
    """Image bytes received with a request, paired with their media type."""

    data: bytes = Field(..., min_length=1)
    mime_type: str = "application/octet-stream"

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def to_data_url(self) -> str:
        """Inline form accepted by the multimodal chat models, e.g. ``data:image/jpeg;base64,...``."""
        return f"data:{self.mime_type};base64,{self.to_base64()}"
