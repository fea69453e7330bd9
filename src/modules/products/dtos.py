"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the transport boundaries (DRF views,
Celery RPC tasks) and the Service layer.  DTOs are immutable
(``frozen=True``); unknown keys are ignored.

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
- ``PaginationDTO``: page/limit for listings.
- ``ValidateProductsDTO``: ids for bulk existence checks.
- ``ProductOutputDTO`` / ``ProductPageDTO``: output shapes.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List

from django.conf import settings
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    FiniteFloat,
    field_validator,
    model_validator,
)

if TYPE_CHECKING:
    from modules.products.models import Product


MAX_PAGE_LIMIT = 100
# Largest row offset a listing may request; keeps OFFSET inside a 32-bit integer.
MAX_PAGE_OFFSET = 2**31 - 1


def _default_page_limit() -> int:
    return settings.DEFAULT_PAGE_LIMIT


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-blank string (surrounding whitespace stripped).
    - ``price`` is a finite number, not negative.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: FiniteFloat

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Price cannot be negative.")
        return v


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional; only supplied fields will be updated. A
    supplied field may not be null, since the columns are NOT NULL.
    ``id`` is accepted so callers may echo the whole record back, but the
    path/message id is authoritative and ``changes()`` never includes it.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    name: str | None = None
    price: FiniteFloat | None = None

    # Validators only run for supplied values, so None here is an explicit null.
    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Name must not be null.")
        if not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: float | None) -> float:
        if v is None:
            raise ValueError("Price must not be null.")
        if v < 0:
            raise ValueError("Price cannot be negative.")
        return v

    def changes(self) -> Dict[str, Any]:
        """Explicitly provided fields, without ``id``."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class PaginationDTO(BaseModel):
    """Immutable DTO for paginated listings (1-based ``page``).

    ``limit`` is capped at ``MAX_PAGE_LIMIT`` and the row offset the page
    implies at ``MAX_PAGE_OFFSET``.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1)
    limit: int = Field(default_factory=_default_page_limit, ge=1, le=MAX_PAGE_LIMIT)

    @model_validator(mode="after")
    def offset_must_be_in_range(self) -> PaginationDTO:
        if (self.page - 1) * self.limit > MAX_PAGE_OFFSET:
            raise ValueError("Page is out of range.")
        return self

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class ValidateProductsDTO(BaseModel):
    """Immutable DTO for bulk id validation; duplicates are allowed."""

    model_config = ConfigDict(frozen=True)

    ids: List[int]


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product responses."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: float
    available: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            available=product.available,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class PageMetaDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int
    last_page: int
    total_items: int


class ProductPageDTO(BaseModel):
    """Page envelope: ``{"data": [...], "meta": {...}}``."""

    model_config = ConfigDict(frozen=True)

    data: List[ProductOutputDTO]
    meta: PageMetaDTO
