"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).  Look-ups declared here are
    **unfiltered**: they see every stored row, soft-deleted or not.
    """

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def get_by_ids(self, ids: Iterable[int]) -> List[T]:
        """Retrieve every entity whose primary key is in ``ids``."""

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> T:
        """Insert a new entity built from ``data`` and return it."""
