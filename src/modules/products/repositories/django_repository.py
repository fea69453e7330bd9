"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity into a domain error.  Store errors (``DatabaseError``)
are never caught here.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

import structlog
from django.db import transaction
from django.utils import timezone

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key, including soft-deleted ones."""
        return Product.objects.filter(id=id).first()

    def get_by_ids(self, ids: Iterable[int]) -> List[Product]:
        """Retrieve every product whose id is in ``ids``, regardless of availability."""
        return list(Product.objects.filter(id__in=list(ids)))

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Product:
        """Insert a new product; ``available`` defaults to ``True``."""
        product = Product.objects.create(**data)
        logger.info("product.saved", product_id=product.id)
        return product

    def count_available(self) -> int:
        return Product.objects.available().count()

    def list_available(self, offset: int, limit: int) -> List[Product]:
        return list(Product.objects.available().order_by("id")[offset : offset + limit])

    def get_available(self, id: int) -> Optional[Product]:
        return Product.objects.available().filter(id=id).first()

    @transaction.atomic
    def update_available(self, id: int, changes: Dict[str, Any]) -> Optional[Product]:
        """Conditional ``UPDATE ... WHERE id = %s AND available`` then re-read.

        ``QuerySet.update`` bypasses ``auto_now``, so ``updated_at`` is set
        explicitly.
        """
        matched = (
            Product.objects.available()
            .filter(id=id)
            .update(**changes, updated_at=timezone.now())
        )
        if not matched:
            return None
        logger.info("product.saved", product_id=id, fields=sorted(changes))
        return Product.objects.get(id=id)
