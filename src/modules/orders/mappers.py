"""Inbound mapping for the orders context.

Turns validated wire DTOs into ``Order`` aggregates and ``OrderPatch``
values.  The first failing check aborts the conversion with a single
``MappingError``.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List

from modules.orders.constants import INITIAL_ORDER_STATUS, parse_order_status
from modules.orders.domain import Address, Order, OrderLine, OrderPatch
from modules.orders.dtos import AddressDTO, CreateOrderDTO, OrderLineDTO, UpdateOrderDTO
from shared.domain.errors import OrderQuantityOutOfBounds
from shared.domain.identifiers import IdentifierGenerator, generate, parse
from shared.domain.patches import supplied


def map_address(dto: AddressDTO) -> Address:
    return Address(
        street=dto.street,
        street_number=dto.street_number,
        zip_code=dto.zip_code,
        city=dto.city,
        province=dto.province,
        country=dto.country,
    )


def map_order_line(dto: OrderLineDTO) -> OrderLine:
    """Quantity is checked before the catalog item id is parsed."""
    if dto.quantity < OrderQuantityOutOfBounds.minimum:
        raise OrderQuantityOutOfBounds(dto.quantity)
    return OrderLine(catalog_item_id=parse(dto.book_id), quantity=dto.quantity)


def map_new_order(dto: CreateOrderDTO, generate_id: IdentifierGenerator = generate) -> Order:
    """Map an order placement payload.

    Lines are validated first, in payload order, then the customer id.
    Without an override the shipping address is a copy of the billing
    address.  New orders are always ``placed``.
    """
    lines: List[OrderLine] = [map_order_line(line) for line in dto.books]
    customer_id = parse(dto.customer_id)

    billing_address = map_address(dto.billing_address)
    if dto.shipping_address_override is not None:
        shipping_address = map_address(dto.shipping_address_override)
    else:
        shipping_address = replace(billing_address)

    return Order(
        id=generate_id(),
        customer_id=customer_id,
        lines=tuple(lines),
        shipping_date=dto.shipping_date,
        billing_address=billing_address,
        shipping_address=shipping_address,
        status=INITIAL_ORDER_STATUS,
    )


def map_order_patch(order_id: str, dto: UpdateOrderDTO) -> OrderPatch:
    """Any recognised status is accepted; transitions are not checked here."""
    target = parse(order_id)
    status = parse_order_status(dto.status)
    return OrderPatch(
        id=target,
        status=status,
        shipping_date=supplied(dto, "shipping_date"),
    )
