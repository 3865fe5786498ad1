"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Request bodies are validated into ``ProductDTO`` before the service is
called.  Domain exceptions are caught and translated into HTTP status
codes; ``ProductConcurrencyConflict`` and storage errors are not caught
and surface as server faults.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import ViewSet

from modules.products.dtos import ProductDTO
from modules.products.exceptions import ProductIdMismatch, ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService


def _parse_body(data: Any) -> Tuple[Optional[ProductDTO], Optional[Response]]:
    """Validate ``data`` into a ``ProductDTO`` or build the 400 response."""
    try:
        return ProductDTO.model_validate(data), None
    except PydanticValidationError as exc:
        errors = exc.errors(
            include_url=False, include_context=False, include_input=False
        )
        return None, Response(
            {"detail": "Invalid product payload.", "errors": errors},
            status=status.HTTP_400_BAD_REQUEST,
        )


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    PATCH is deliberately not implemented: updates replace the record.
    """

    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /products"""
        products = self._service.list_products()
        return Response([dto.to_wire() for dto in products])

    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /products/{pk}"""
        try:
            product = self._service.get_product(int(pk))
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(product.to_wire())

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /products"""
        dto, error = _parse_body(request.data)
        if error is not None:
            return error

        product = self._service.create_product(dto)

        location = reverse(
            "product-detail", kwargs={"pk": product.id}, request=request
        )
        return Response(
            product.to_wire(),
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    def update(self, request: Request, pk: str) -> Response:
        """PUT /products/{pk}"""
        dto, error = _parse_body(request.data)
        if error is not None:
            return error

        try:
            self._service.update_product(int(pk), dto)
        except ProductIdMismatch as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /products/{pk}"""
        try:
            self._service.delete_product(int(pk))
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
