"""DRF exception handler: HTTP presentation of the catalog error kinds."""

from __future__ import annotations

import structlog
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.exceptions import ErrorKind, describe_error

logger = structlog.get_logger(__name__)


def custom_exception_handler(exc, context):
    """Render ``CatalogError`` and store errors as ``{"detail", "error"}``.

    Anything else goes through DRF's default handler.
    """
    info = describe_error(exc)
    if info is None:
        return exception_handler(exc, context)

    if info.kind is ErrorKind.STORE_FAILURE:
        logger.error("http.store_failure", status=info.status, error=str(exc))
    else:
        logger.warning("http.domain_error", kind=info.kind.value, status=info.status)

    return Response(
        {"detail": info.message, "error": info.kind.value},
        status=info.status,
    )
