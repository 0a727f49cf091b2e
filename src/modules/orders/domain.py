"""Order domain entities.

- ``Address``: value object compared field by field.
- ``OrderLine``: a catalog item id and a quantity (>= 1).
- ``Order``: aggregate handed to and returned by the order service.
- ``OrderPatch``: status change plus an optional new shipping date.
- ``Inventory``: stock counters, read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Tuple

from modules.orders.constants import OrderStatus
from shared.domain.identifiers import Identifier
from shared.domain.patches import UNSET, PatchMixin


@dataclass(frozen=True)
class Address:
    street: str
    street_number: str
    zip_code: str
    city: str
    country: str
    province: Optional[str] = None


@dataclass(frozen=True)
class OrderLine:
    catalog_item_id: Identifier
    quantity: int


@dataclass(frozen=True)
class Order:
    """Order aggregate.

    ``shipping_address`` and ``billing_address`` are independent values; the
    wire-level override is derived from them at render time.
    """

    id: Identifier
    customer_id: Identifier
    lines: Tuple[OrderLine, ...]
    shipping_date: datetime
    billing_address: Address
    shipping_address: Address
    status: OrderStatus

    @property
    def ships_to_billing_address(self) -> bool:
        return self.shipping_address == self.billing_address


@dataclass(frozen=True)
class OrderPatch(PatchMixin):
    id: Identifier
    status: OrderStatus
    shipping_date: Any = UNSET


@dataclass(frozen=True)
class Inventory:
    available: int
    reordered: int
    out_of_stock: int
