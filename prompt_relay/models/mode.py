"""Output mode decoded from the ``selectedLang`` form field.

The frontend sends selectors such as ``ID``, ``EN``, ``ID-RAW`` or ``EN-RAW``.
Two independent checks are applied to the raw string:

* ends with ``-RAW``          -> the model returns a plain prompt paragraph
* contains ``EN`` (anywhere)  -> output language is English

Anything else is not rejected. It decodes to :attr:`RequestMode.STRUCTURED_LOCAL`,
i.e. a JSON description in the configured default language.
"""
from __future__ import annotations

from enum import Enum

RAW_SUFFIX = "-RAW"
ENGLISH_MARKER = "EN"
ENGLISH = "English"


class RequestMode(str, Enum):
    STRUCTURED_LOCAL = "structured-local"
    STRUCTURED_ENGLISH = "structured-english"
    RAW_LOCAL = "raw-local"
    RAW_ENGLISH = "raw-english"

    @classmethod
    def from_selector(cls, selector: str | None) -> "RequestMode":
        value = selector or ""
        raw = value.endswith(RAW_SUFFIX)
        english = ENGLISH_MARKER in value
        if raw:
            return cls.RAW_ENGLISH if english else cls.RAW_LOCAL
        return cls.STRUCTURED_ENGLISH if english else cls.STRUCTURED_LOCAL

    @property
    def is_raw(self) -> bool:
        return self in (RequestMode.RAW_LOCAL, RequestMode.RAW_ENGLISH)

    @property
    def is_english(self) -> bool:
        return self in (RequestMode.STRUCTURED_ENGLISH, RequestMode.RAW_ENGLISH)

    def output_language(self, default_language: str) -> str:
        return ENGLISH if self.is_english else default_language
