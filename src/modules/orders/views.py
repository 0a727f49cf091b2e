"""Order API views.

Exposes the ``OrderService`` via HTTP using DRF.  Mapping errors raised
while converting the request propagate to the project exception handler.
Deleting an order always succeeds.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import GenericViewSet

from modules.orders.dtos import (
    CreateOrderDTO,
    InventoryOutputDTO,
    OrderOutputDTO,
    UpdateOrderDTO,
)
from modules.orders.mappers import map_new_order, map_order_patch
from modules.orders.services import OrderService
from shared.domain.identifiers import parse


def _render(order) -> dict:
    return OrderOutputDTO.from_entity(order).model_dump(mode="json")


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService()

    def create(self, request: Request) -> Response:
        """POST /api/v1/store/orders/"""
        dto = CreateOrderDTO.model_validate(request.data)
        order = self._service.create_order(map_new_order(dto))
        return Response(_render(order), status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/store/orders/{pk}/"""
        order = self._service.get_order(parse(pk))
        return Response(_render(order))

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/store/orders/{pk}/

        ``status`` is required; any recognised status is accepted.
        """
        dto = UpdateOrderDTO.model_validate(request.data)
        patch = map_order_patch(pk, dto)
        order = self._service.update_order(patch)
        return Response(_render(order))

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/store/orders/{pk}/"""
        self._service.delete_order(parse(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)


class InventoryView(APIView):
    """GET /api/v1/store/inventory/"""

    def get(self, request: Request) -> Response:
        inventory = OrderService().get_inventory()
        return Response(InventoryOutputDTO.from_entity(inventory).model_dump(mode="json"))
