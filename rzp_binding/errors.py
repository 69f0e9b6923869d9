"""
Error types raised by the binding.

Two families:
- PreconditionError: argument problems detected locally, before any HTTP call
- TransportError: anything that went wrong talking to the API (network failure,
  non-2xx response, undecodable body)

Resources never wrap transport errors; they reach the caller unchanged.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class RazorpayError(Exception):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class PreconditionError(RazorpayError, ValueError):
    pass


class MissingIdentifierError(PreconditionError):
    pass


class ArgumentTypeError(PreconditionError, TypeError):
    pass


class ConfigurationError(RazorpayError, ValueError):
    pass


class TransportError(RazorpayError):
    pass


class RazorpayAPIError(TransportError):
    """Non-2xx response, parsed from the API's ``{"error": {...}}`` envelope."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        code: Optional[str] = None,
        field: Optional[str] = None,
        source: Optional[str] = None,
        step: Optional[str] = None,
        reason: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, payload=payload)
        self.status_code = status_code
        self.code = code
        self.description = message
        self.field = field
        self.source = source
        self.step = step
        self.reason = reason
        self.metadata = metadata or {}

    def __str__(self) -> str:
        prefix = f"{self.code}: " if self.code else ""
        return f"[{self.status_code}] {prefix}{self.description}"
