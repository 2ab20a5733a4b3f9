from .image import UploadedImage
from .mode import RequestMode
from .responses import (
    BaseDescription,
    ErrorResponse,
    RawPromptResponse,
    StructuredPrompt,
    ValidationErrorResponse,
)

__all__ = [
    "UploadedImage",
    "RequestMode",
    "BaseDescription",
    "ErrorResponse",
    "RawPromptResponse",
    "StructuredPrompt",
    "ValidationErrorResponse",
]
