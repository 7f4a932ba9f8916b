# docs_translator/errors.py
from __future__ import annotations

from typing import Optional


class TranslationError(RuntimeError):
    """Base class for everything the docs translator raises on purpose."""


class ConfigurationError(TranslationError):
    """
    Raised when the run cannot start at all, e.g. the primary provider
    has no API key. Never retried.
    """


class TransportError(TranslationError):
    """Network-level failure talking to a provider (DNS, connect, reset...)."""


class ProviderError(TranslationError):
    """
    Provider answered, but not with a usable completion:
    non-2xx status, non-JSON body or no choices[0].message.content.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class FilesystemError(TranslationError):
    """Read / write / mkdir failure. Aborts the run."""
