"""Order service layer (Use Cases).

Stub implementation: orders are not stored yet.  Placement echoes the
validated order, look-ups answer with a canned order and inventory figures
are fixed.  Status changes are accepted unconditionally.
"""

from __future__ import annotations

from dataclasses import replace

import structlog
from django.utils import timezone

from modules.orders.constants import OrderStatus
from modules.orders.domain import Address, Inventory, Order, OrderLine, OrderPatch
from shared.domain.identifiers import Identifier, generate, render

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for orders and inventory."""

    def create_order(self, order: Order) -> Order:
        log = logger.bind(order_id=render(order.id), customer_id=render(order.customer_id))
        log.info("order.placed", lines=len(order.lines))
        return order

    def get_order(self, order_id: Identifier) -> Order:
        logger.info("order.retrieved", order_id=render(order_id))
        return self._canned_order(order_id)

    def update_order(self, patch: OrderPatch) -> Order:
        changes = patch.changes()
        order = replace(self._canned_order(patch.id), **changes)
        logger.info(
            "order.updated", order_id=render(patch.id), status=order.status.value
        )
        return order

    def delete_order(self, order_id: Identifier) -> None:
        logger.info("order.deleted", order_id=render(order_id))

    def get_inventory(self) -> Inventory:
        return Inventory(available=42, reordered=42, out_of_stock=42)

    @staticmethod
    def _canned_order(order_id: Identifier) -> Order:
        address = Address(
            street="Street",
            street_number="1b",
            zip_code="123456",
            city="My City",
            province="province",
            country="Country",
        )
        return Order(
            id=order_id,
            customer_id=generate(),
            lines=(OrderLine(catalog_item_id=generate(), quantity=8),),
            shipping_date=timezone.now(),
            billing_address=address,
            shipping_address=address,
            status=OrderStatus.SHIPPED,
        )
