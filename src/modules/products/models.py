"""Product model with availability-based soft delete.

A product is *active* while ``available`` is ``True``.  Soft-deleting a
product flips ``available`` to ``False``; rows are never removed.

- ``objects`` is **unfiltered** (returns every row, soft-deleted or not).
- Use ``Product.objects.available()`` for the read paths that must hide
  soft-deleted products.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class ProductQuerySet(models.QuerySet):
    """QuerySet with the availability filter."""

    def available(self) -> ProductQuerySet:
        """Return only active (not soft-deleted) products."""
        return self.filter(available=True)


class ProductManager(models.Manager.from_queryset(ProductQuerySet)):
    pass


class Product(BaseModel):
    """Catalog product.

    Ordered by ``id`` ascending so that pagination is reproducible.
    """

    name = models.CharField(max_length=255)
    price = models.FloatField()
    available = models.BooleanField(default=True, db_index=True)

    objects = ProductManager()

    class Meta:
        db_table = "products"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"#{self.id} {self.name}"
