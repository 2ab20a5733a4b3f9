from __future__ import annotations

from pydantic import BaseModel


class BaseDescription(BaseModel):
    background: str
    subjectDescription: str
    visualStyle: str
    lighting: str
    characterTemplate: str


class StructuredPrompt(BaseModel):
    """Shape the structured template asks the model to produce."""

    baseDescription: BaseDescription
    finalPrompt: str


class RawPromptResponse(BaseModel):
    finalPrompt: str


class ErrorResponse(BaseModel):
    code: int = 500
    message: str


class ValidationErrorResponse(BaseModel):
    error: str
