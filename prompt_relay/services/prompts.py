"""Prompt templates sent alongside the uploaded image."""
from __future__ import annotations

RAW_TEMPLATE = (
    "Analyze the image and generate a highly detailed, single-paragraph text prompt "
    "for an AI image generator. The output must ONLY be the final prompt text and must "
    "be in {language}. Include the following detail at the end of the prompt: "
    "'aspect ratio: {ratio}'."
)

STRUCTURED_TEMPLATE = """\
Analyze the image and generate a detailed description for an AI image generator.
The output must ONLY be a JSON object where all descriptive values are in {language}.
Use the following structure:
{{
  "baseDescription": {{
    "background": "...",
    "subjectDescription": "...",
    "visualStyle": "...",
    "lighting": "...",
    "characterTemplate": "..."
  }},
  "finalPrompt": "Combine all baseDescription fields into one cohesive text prompt for an AI image generator in {language}. Include the following detail at the end of the prompt: 'aspect ratio: {ratio}'."
}}
"""


def build_prompt(*, raw: bool, language: str, ratio: str) -> str:
    template = RAW_TEMPLATE if raw else STRUCTURED_TEMPLATE
    return template.format(language=language, ratio=ratio)
