"""RPC presentation of the catalog error kinds.

Remote callers (other services talking over Celery) cannot catch our
exception classes, so every RPC endpoint answers with an envelope:

    {"result": <payload>}                                  on success
    {"error": {"kind": ..., "status": ..., "message": ...}} on failure
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Dict

import structlog
from pydantic import ValidationError as PydanticValidationError

from modules.core.exceptions import ErrorKind, InvalidPayload, describe_error

logger = structlog.get_logger(__name__)


def rpc_endpoint(func: Callable[..., Any]) -> Callable[..., Dict[str, Any]]:
    """Wrap ``func`` so domain, payload and store errors become error payloads.

    Exceptions that ``describe_error`` does not recognise propagate to the
    task runner.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Dict[str, Any]:
        log = logger.bind(endpoint=func.__name__)
        try:
            return {"result": func(*args, **kwargs)}
        except PydanticValidationError as exc:
            log.warning("rpc.invalid_payload", errors=exc.error_count())
            return {"error": InvalidPayload(str(exc)).to_dict()}
        except Exception as exc:
            info = describe_error(exc)
            if info is None:
                raise
            if info.kind is ErrorKind.STORE_FAILURE:
                log.exception("rpc.store_failure", status=info.status)
            else:
                log.warning("rpc.domain_error", kind=info.kind.value, status=info.status)
            return {"error": info.to_dict()}

    return wrapper
