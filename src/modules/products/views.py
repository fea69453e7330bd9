"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Invalid input is answered here with 400; ``ProductNotFound``,
``InvalidProductIds`` and store errors propagate to
``modules.core.exception_handler`` which owns their HTTP presentation.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import (
    CreateProductDTO,
    PaginationDTO,
    UpdateProductDTO,
    ValidateProductsDTO,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


def _bad_request(exc: Exception) -> Response:
    return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    serializer_class = ProductSerializer
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products/?page=&limit="""
        params: Dict[str, Any] = {
            key: request.query_params[key]
            for key in ("page", "limit")
            if key in request.query_params
        }
        try:
            dto = PaginationDTO(**params)
        except PydanticValidationError as exc:
            return _bad_request(exc)

        page = self._service.list_products(dto)
        return Response(page.model_dump(mode="json"))

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        product = self._service.get_product(int(pk))
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        try:
            dto = CreateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _bad_request(exc)

        product = self._service.create_product(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/

        The ``id`` of the body, if any, is ignored in favour of ``pk``.
        """
        try:
            dto = UpdateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _bad_request(exc)

        product = self._service.update_product(int(pk), dto)
        return Response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/

        Soft delete: answers with the product as stored afterwards.
        """
        product = self._service.delete_product(int(pk))
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Bulk validation
    # ------------------------------------------------------------------

    @action(detail=False, methods=["post"], url_path="validate")
    def validate_ids(self, request: Request) -> Response:
        """POST /api/v1/products/validate/

        Accepts ``{"ids": [1, 2, 3]}``.
        """
        try:
            dto = ValidateProductsDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _bad_request(exc)

        products = self._service.validate_products(dto.ids)
        return Response(ProductSerializer(products, many=True).data)
