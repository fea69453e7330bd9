"""Product repository interface.

Extends ``IRepository[Product]`` with the availability-filtered look-ups
and conditional writes required by the catalog use-cases.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""

    @abstractmethod
    def count_available(self) -> int:
        """Count products that have not been soft-deleted."""

    @abstractmethod
    def list_available(self, offset: int, limit: int) -> List[Product]:
        """Return a slice of available products ordered by id."""

    @abstractmethod
    def get_available(self, id: int) -> Optional[Product]:
        """Retrieve an available product, ``None`` if absent or soft-deleted."""

    @abstractmethod
    def update_available(self, id: int, changes: Dict[str, Any]) -> Optional[Product]:
        """Apply ``changes`` to an available product in one conditional write.

        Returns the updated product, or ``None`` when no available product
        matched ``id`` (nothing is written in that case).
        """
