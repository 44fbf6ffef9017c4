# osrm/core/errors.py
# -*- coding: utf-8 -*-

"""
Error taxonomy shared by the whole package.

- ValidationError: bad input, detected before any network I/O
- TransportError: connection failure, timeout, proxy failure
- ParseError: the reply body is not JSON

Semantic failures reported by the service itself (`{"code": "NoRoute", ...}`)
are not exceptions; they come back as ordinary documents.
"""

from __future__ import annotations

from typing import Optional


class OSRMError(Exception):
    """Base class for every error raised by this package."""
    ...


class ValidationError(OSRMError, ValueError):
    """Raised when an operation precondition is violated."""
    ...


class TransportError(OSRMError):
    """Raised when the HTTP exchange itself fails."""

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class ParseError(OSRMError):
    """Raised when the reply body cannot be decoded as JSON."""

    def __init__(
          self
        , message: str
        , *
        , url: Optional[str] = None
        , status: Optional[int] = None
        , body_preview: str = ""
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status = status
        self.body_preview = body_preview
