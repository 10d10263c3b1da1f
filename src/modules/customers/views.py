"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.
Request bodies are validated into ``CustomerInputDTO`` before the
service is touched; a validation failure answers 400 with a
``{field: message}`` map.  Domain exceptions are caught and translated
into HTTP status codes with the exception message as a plain-text
body.  Anything else falls through to
``modules.core.exceptions.api_exception_handler``.
"""

from __future__ import annotations

from typing import Any, Tuple

import structlog
from django.http import HttpResponse
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import plain_text_response
from modules.core.metrics import metrics
from modules.customers.dtos import CustomerInputDTO, field_errors
from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService

logger = structlog.get_logger(__name__)


def _parse_body(data: Any) -> Tuple[CustomerInputDTO | None, Response | None]:
    try:
        return CustomerInputDTO.model_validate(data), None
    except PydanticValidationError as exc:
        errors = field_errors(exc)
        logger.info("customer.validation_failed", fields=sorted(errors))
        return None, Response(errors, status=status.HTTP_400_BAD_REQUEST)


class CustomerViewSet(GenericViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.  No ``partial_update``: PATCH is 405.
    """

    queryset = Customer.objects.all()
    serializer_class = CustomerSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(
            repository=CustomerDjangoRepository(),
            metrics=metrics,
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/customers"""
        customers = self._service.list_customers()
        return Response(CustomerSerializer(customers, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> HttpResponse:
        """GET /api/customers/{pk}"""
        try:
            customer = self._service.get_customer(pk)
        except CustomerNotFound as exc:
            return plain_text_response(str(exc), status.HTTP_404_NOT_FOUND)
        return Response(CustomerSerializer(customer).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> HttpResponse:
        """POST /api/customers"""
        dto, error_response = _parse_body(request.data)
        if error_response is not None:
            return error_response

        try:
            customer = self._service.create_customer(dto)
        except CustomerAlreadyExists as exc:
            return plain_text_response(str(exc), status.HTTP_400_BAD_REQUEST)

        out = CustomerSerializer(customer)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> HttpResponse:
        """PUT /api/customers/{pk}. The path id wins over any id in the body."""
        dto, error_response = _parse_body(request.data)
        if error_response is not None:
            return error_response

        try:
            customer = self._service.update_customer(pk, dto)
        except CustomerNotFound as exc:
            return plain_text_response(str(exc), status.HTTP_404_NOT_FOUND)

        return Response(CustomerSerializer(customer).data)

    def destroy(self, request: Request, pk: str | None = None) -> HttpResponse:
        """DELETE /api/customers/{pk}"""
        try:
            self._service.delete_customer(pk)
        except CustomerNotFound as exc:
            return plain_text_response(str(exc), status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
