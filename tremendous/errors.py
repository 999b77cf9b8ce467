from __future__ import annotations

from typing import Optional


class TremendousAPIError(Exception):
    """Base class for every error raised by the Tremendous client."""


class TransportError(TremendousAPIError):
    """The HTTP call itself failed (DNS, refused connection, timeout...)."""
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class UnexpectedStatusError(TremendousAPIError):
    """Raised when the API answers with a status outside the accepted set."""
    def __init__(self, status: int, body: str, method: str, url: str):
        super().__init__(f"Tremendous API {method} {url} failed with {status}: {body}")
        self.status = status
        self.body = body
        self.method = method
        self.url = url


class DecodeError(TremendousAPIError):
    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        super().__init__(f"failed to decode {operation}: {cause}")
        self.operation = operation
        self.cause = cause


class ClientValidationError(TremendousAPIError):
    """Input rejected locally, before any request was sent."""
    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
