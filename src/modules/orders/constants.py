"""Order domain constants.

Defines the order status vocabulary.  The values are part of the public
wire protocol.  Status transitions are not validated: any member may follow
any other.
"""

from __future__ import annotations

from typing import Iterable, List

from django.db import models

from shared.domain.vocabulary import parse_choice, parse_choices, render_choice

ORDER_STATUS_DOMAIN = "order_status"


class OrderStatus(models.TextChoices):
    PLACED = "placed", "Placed"
    SHIPPED = "shipped", "Shipped"
    DELIVERED = "delivered", "Delivered"
    CANCELED = "canceled", "Canceled"


INITIAL_ORDER_STATUS = OrderStatus.PLACED


def parse_order_status(raw: str) -> OrderStatus:
    return parse_choice(OrderStatus, ORDER_STATUS_DOMAIN, raw)


def parse_order_statuses(raws: Iterable[str]) -> List[OrderStatus]:
    return parse_choices(OrderStatus, ORDER_STATUS_DOMAIN, raws)


def render_order_status(status: OrderStatus) -> str:
    return render_choice(status)
