"""Celery tasks: RPC boundary of the product catalog.

Other services call these by name (``send_task("find_one_product", ...)``).
Arguments and results are plain JSON; domain and store errors come back
as status-coded payloads produced by ``modules.core.rpc.rpc_endpoint``.
"""

from __future__ import annotations

from typing import Any, Dict, List

from celery import shared_task

from modules.core.exceptions import InvalidPayload
from modules.core.rpc import rpc_endpoint
from modules.products.dtos import (
    CreateProductDTO,
    PaginationDTO,
    ProductOutputDTO,
    UpdateProductDTO,
    ValidateProductsDTO,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService


def _service() -> ProductService:
    return ProductService(repository=ProductDjangoRepository())


def _dump(product) -> Dict[str, Any]:
    return ProductOutputDTO.from_entity(product).model_dump(mode="json")


def _product_id(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise InvalidPayload(f"Invalid product id: {value!r}")
    try:
        return int(value)
    except ValueError:
        raise InvalidPayload(f"Invalid product id: {value!r}") from None


@shared_task(name="create_product")
@rpc_endpoint
def create_product(payload: Dict[str, Any]) -> Dict[str, Any]:
    dto = CreateProductDTO.model_validate(payload)
    return _dump(_service().create_product(dto))


@shared_task(name="find_all_products")
@rpc_endpoint
def find_all_products(payload: Dict[str, Any] | None = None) -> Dict[str, Any]:
    dto = PaginationDTO.model_validate(payload or {})
    return _service().list_products(dto).model_dump(mode="json")


@shared_task(name="find_one_product")
@rpc_endpoint
def find_one_product(id: Any) -> Dict[str, Any]:
    return _dump(_service().get_product(_product_id(id)))


@shared_task(name="update_product")
@rpc_endpoint
def update_product(payload: Dict[str, Any]) -> Dict[str, Any]:
    """The ``id`` key addresses the product; the remaining keys are the patch."""
    dto = UpdateProductDTO.model_validate(payload)
    if dto.id is None:
        raise InvalidPayload("Field 'id' is required.")
    return _dump(_service().update_product(dto.id, dto))


@shared_task(name="delete_product")
@rpc_endpoint
def delete_product(id: Any) -> Dict[str, Any]:
    return _dump(_service().delete_product(_product_id(id)))


@shared_task(name="validate_products")
@rpc_endpoint
def validate_products(ids: List[int]) -> List[Dict[str, Any]]:
    dto = ValidateProductsDTO(ids=ids)
    return [_dump(p) for p in _service().validate_products(dto.ids)]
