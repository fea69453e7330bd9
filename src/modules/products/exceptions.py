"""Product domain exceptions.

Raised by the Service Layer.  They carry a transport-agnostic kind and
status (see ``modules.core.exceptions``); the HTTP exception handler and
the RPC endpoints translate them into their own error formats.
"""

from __future__ import annotations

from typing import Iterable

from modules.core.exceptions import CatalogError, ErrorKind


class ProductNotFound(CatalogError):
    """The requested product does not exist or has been soft-deleted."""

    kind = ErrorKind.NOT_FOUND
    status = 404

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product with ID: {product_id} was not found.")
        self.product_id = product_id


class InvalidProductIds(CatalogError):
    """One or more ids of a bulk validation request do not exist at all."""

    kind = ErrorKind.INVALID_IDS
    status = 400

    def __init__(self, missing_ids: Iterable[int]) -> None:
        self.missing_ids = list(missing_ids)
        joined = ", ".join(str(i) for i in self.missing_ids)
        super().__init__(f"Some products were not found: {joined}")
