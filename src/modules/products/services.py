"""Product service layer (Use Cases).

Orchestrates the catalog use-cases, delegating persistence to the
injected ``IProductRepository``.

Rules enforced here:
- Soft-deleted products are invisible to look-ups, listings, updates
  and removals.
- The ``id`` of an update payload never reaches the store.
- Removal is a soft delete (``available = False``); rows are never
  deleted.
- Bulk validation checks existence only, regardless of availability.

Store errors raised by the repository propagate unchanged.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterable, List

import structlog

from modules.products.dtos import PageMetaDTO, ProductOutputDTO, ProductPageDTO
from modules.products.exceptions import InvalidProductIds, ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, PaginationDTO, UpdateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    Holds no state between calls.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new, available product."""
        product = self._repo.create(dto.model_dump())
        logger.info("product.created", product_id=product.id, name=product.name)
        return product

    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        """Apply the fields supplied in ``dto`` to an available product.

        Raises:
            ProductNotFound: if the product does not exist or is soft-deleted.
        """
        log = logger.bind(product_id=id)
        if dto.id is not None and dto.id != id:
            log.warning("product.update_id_ignored", payload_id=dto.id)

        product = self._repo.update_available(id, dto.changes())
        if product is None:
            log.info("product.not_found")
            raise ProductNotFound(id)

        log.info("product.updated")
        return product

    def delete_product(self, id: int) -> Product:
        """Soft-delete a product and return it with ``available = False``.

        Raises:
            ProductNotFound: if the product does not exist or is already
                soft-deleted.
        """
        product = self._repo.update_available(id, {"available": False})
        if product is None:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(id)

        logger.info("product.soft_deleted", product_id=id)
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, dto: PaginationDTO) -> ProductPageDTO:
        """Return one page of available products ordered by id.

        A page past ``last_page`` yields an empty ``data`` list with the
        metadata still populated.
        """
        total_items = self._repo.count_available()
        last_page = math.ceil(total_items / dto.limit)
        products = self._repo.list_available(
            offset=dto.offset, limit=dto.limit
        )
        logger.info(
            "products.listed",
            page=dto.page,
            limit=dto.limit,
            total_items=total_items,
        )
        return ProductPageDTO(
            data=[ProductOutputDTO.from_entity(p) for p in products],
            meta=PageMetaDTO(
                page=dto.page, last_page=last_page, total_items=total_items
            ),
        )

    def get_product(self, id: int) -> Product:
        """Retrieve a single available product by ID.

        Raises:
            ProductNotFound: if the product does not exist or is soft-deleted.
        """
        product = self._repo.get_available(id)
        if not product:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(id)
        return product

    def validate_products(self, ids: Iterable[int]) -> List[Product]:
        """Check that every id exists, soft-deleted or not.

        Duplicated ids are collapsed before querying.

        Raises:
            InvalidProductIds: listing, in request order, the ids with no row.
        """
        unique_ids = list(dict.fromkeys(ids))
        products = self._repo.get_by_ids(unique_ids)

        if len(products) != len(unique_ids):
            found = {p.id for p in products}
            missing = [i for i in unique_ids if i not in found]
            logger.warning("products.invalid_ids", missing_ids=missing)
            raise InvalidProductIds(missing)

        logger.info("products.validated", count=len(products))
        return products
