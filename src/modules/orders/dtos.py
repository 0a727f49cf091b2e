"""Order DTOs for the wire boundary.

Framework-agnostic data transfer objects using Pydantic v2.  DTOs are
immutable (``frozen=True``).  Input DTOs only check wire types; the order
invariants (line quantity, identifier format, status vocabulary) belong to
``mappers.py``.

- ``AddressDTO``: postal address, used in requests and responses.
- ``OrderLineDTO``: ``book_id`` + ``quantity``.
- ``CreateOrderDTO``: order placement payload.
- ``UpdateOrderDTO``: status change (required) and optional shipping date.
- ``OrderOutputDTO``: order response; ``shipping_address_override`` is only
  present when the shipping address differs from the billing address.
- ``InventoryOutputDTO``: stock counters.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    StrictInt,
    model_serializer,
)

from modules.orders.constants import render_order_status
from modules.orders.domain import Address, Inventory, Order, OrderLine
from shared.domain.identifiers import render


class AddressDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    street: str
    street_number: str
    zip_code: str
    city: str
    province: Optional[str] = None
    country: str

    @classmethod
    def from_entity(cls, address: Address) -> AddressDTO:
        return cls(
            street=address.street,
            street_number=address.street_number,
            zip_code=address.zip_code,
            city=address.city,
            province=address.province,
            country=address.country,
        )


class OrderLineDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    book_id: str
    quantity: StrictInt

    @classmethod
    def from_entity(cls, line: OrderLine) -> OrderLineDTO:
        return cls(book_id=render(line.catalog_item_id), quantity=line.quantity)


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateOrderDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    customer_id: str
    books: List[OrderLineDTO]
    shipping_date: datetime
    billing_address: AddressDTO
    shipping_address_override: Optional[AddressDTO] = None


class UpdateOrderDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str
    shipping_date: Optional[datetime] = None


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class OrderOutputDTO(BaseModel):
    """Order response.

    ``shipping_address_override`` is never rendered as ``null``: it is
    dropped from every dump when the order ships to its billing address.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    customer_id: str
    books: List[OrderLineDTO]
    shipping_date: datetime
    billing_address: AddressDTO
    shipping_address_override: Optional[AddressDTO] = None
    status: str

    @classmethod
    def from_entity(cls, order: Order) -> OrderOutputDTO:
        fields = {
            "id": render(order.id),
            "customer_id": render(order.customer_id),
            "books": [OrderLineDTO.from_entity(line) for line in order.lines],
            "shipping_date": order.shipping_date,
            "billing_address": AddressDTO.from_entity(order.billing_address),
            "status": render_order_status(order.status),
        }
        # Re-derived on every render; addresses may have diverged since creation.
        if not order.ships_to_billing_address:
            fields["shipping_address_override"] = AddressDTO.from_entity(
                order.shipping_address
            )
        return cls(**fields)

    @model_serializer(mode="wrap")
    def _omit_absent_override(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        if data.get("shipping_address_override") is None:
            data.pop("shipping_address_override", None)
        return data


class InventoryOutputDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    books_available: int
    books_reordered: int
    books_out_of_stock: int

    @classmethod
    def from_entity(cls, inventory: Inventory) -> InventoryOutputDTO:
        return cls(
            books_available=inventory.available,
            books_reordered=inventory.reordered,
            books_out_of_stock=inventory.out_of_stock,
        )
