"""Transport-agnostic error kinds.

Domain services raise subclasses of ``CatalogError``; store failures are
``django.db.DatabaseError`` instances raised by the ORM and left untouched.
Each transport boundary (DRF exception handler, Celery RPC tasks) calls
``describe_error`` to obtain the kind, status and message, then renders
them in its own format.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Dict, Optional

from django.db import DatabaseError, IntegrityError


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    INVALID_IDS = "invalid_ids"
    INVALID_PAYLOAD = "invalid_payload"
    STORE_FAILURE = "store_failure"


class CatalogError(Exception):
    """Base class for structured, caller-facing domain errors.

    Subclasses set ``kind`` and ``status``; ``status`` follows HTTP
    semantics so every transport can reuse it as-is.
    """

    kind: ErrorKind
    status: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return ErrorInfo(kind=self.kind, status=self.status, message=self.message).to_dict()


class InvalidPayload(CatalogError):
    """A remote caller sent arguments that do not match the expected shape."""

    kind = ErrorKind.INVALID_PAYLOAD
    status = 400


@dataclass(frozen=True)
class ErrorInfo:
    kind: ErrorKind
    status: int
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "status": self.status,
            "message": self.message,
        }


def describe_error(exc: BaseException) -> Optional[ErrorInfo]:
    """Classify ``exc`` into an ``ErrorInfo``.

    Returns ``None`` when ``exc`` is neither a ``CatalogError`` nor a
    store error, leaving it to the boundary's default handling.
    """
    if isinstance(exc, CatalogError):
        return ErrorInfo(kind=exc.kind, status=exc.status, message=exc.message)
    if isinstance(exc, IntegrityError):
        return ErrorInfo(
            kind=ErrorKind.STORE_FAILURE,
            status=409,
            message=f"Store constraint violated: {exc}",
        )
    if isinstance(exc, DatabaseError):
        return ErrorInfo(
            kind=ErrorKind.STORE_FAILURE,
            status=503,
            message=f"Store unavailable: {exc}",
        )
    return None
