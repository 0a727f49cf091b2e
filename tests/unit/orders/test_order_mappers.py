"""Unit tests for order inbound mapping.

Covers:
- Line quantity bound and line-before-customer validation order.
- Shipping address derivation from the billing address or the override.
- Order patches: required status, optional shipping date, no transition rules.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from modules.orders.constants import OrderStatus
from modules.orders.dtos import CreateOrderDTO, UpdateOrderDTO
from modules.orders.mappers import map_new_order, map_order_patch
from shared.domain.errors import InvalidEnumValue, InvalidIdentifier, OrderQuantityOutOfBounds
from shared.domain.identifiers import parse
from shared.domain.patches import UNSET

pytestmark = pytest.mark.unit

CUSTOMER_ID = "0ujtsYcgvSTl8PAuAdqWYSMnLOv"
BOOK_ID = "2N1yQqzh1fhkGEPv5rJRqOZqxE3"
ORDER_ID = "0ujsswThIGTUYm2K8FjOOfXtY1K"

BILLING = {
    "street": "Main Street",
    "street_number": "1b",
    "zip_code": "12345",
    "city": "Weimar",
    "country": "DE",
}


def _order_payload(**overrides):
    payload = {
        "customer_id": CUSTOMER_ID,
        "books": [{"book_id": BOOK_ID, "quantity": 2}],
        "shipping_date": "2026-11-01T10:00:00Z",
        "billing_address": BILLING,
    }
    payload.update(overrides)
    return CreateOrderDTO.model_validate(payload)


class TestMapNewOrder:
    def test_maps_payload(self, fixed_id_generator, fixed_id):
        order = map_new_order(_order_payload(), generate_id=fixed_id_generator)
        assert order.id == fixed_id
        assert order.customer_id == parse(CUSTOMER_ID)
        assert order.lines[0].catalog_item_id == parse(BOOK_ID)
        assert order.lines[0].quantity == 2
        assert order.shipping_date == datetime(2026, 11, 1, 10, tzinfo=timezone.utc)

    def test_new_orders_are_placed(self):
        assert map_new_order(_order_payload()).status == OrderStatus.PLACED

    def test_zero_quantity_is_rejected(self):
        dto = _order_payload(books=[{"book_id": BOOK_ID, "quantity": 0}])
        with pytest.raises(OrderQuantityOutOfBounds) as exc_info:
            map_new_order(dto)
        assert exc_info.value.value == 0

    def test_quantity_one_is_accepted(self):
        dto = _order_payload(books=[{"book_id": BOOK_ID, "quantity": 1}])
        assert map_new_order(dto).lines[0].quantity == 1

    def test_bad_book_id(self):
        dto = _order_payload(books=[{"book_id": "bad", "quantity": 1}])
        with pytest.raises(InvalidIdentifier):
            map_new_order(dto)

    def test_lines_are_checked_before_customer_id(self):
        dto = _order_payload(
            customer_id="bad-customer",
            books=[{"book_id": BOOK_ID, "quantity": 0}],
        )
        with pytest.raises(OrderQuantityOutOfBounds):
            map_new_order(dto)

    def test_quantity_is_checked_before_book_id_within_a_line(self):
        dto = _order_payload(books=[{"book_id": "bad", "quantity": 0}])
        with pytest.raises(OrderQuantityOutOfBounds):
            map_new_order(dto)

    def test_customer_id_checked_once_lines_pass(self):
        with pytest.raises(InvalidIdentifier) as exc_info:
            map_new_order(_order_payload(customer_id="bad-customer"))
        assert exc_info.value.raw_input == "bad-customer"


class TestShippingAddressDerivation:
    def test_without_override_ships_to_billing_address(self):
        order = map_new_order(_order_payload())
        assert order.shipping_address == order.billing_address
        assert order.ships_to_billing_address

    def test_override_differs_where_payload_differs(self):
        override = dict(BILLING, city="Jena")
        order = map_new_order(_order_payload(shipping_address_override=override))
        assert order.shipping_address.city == "Jena"
        assert order.billing_address.city == "Weimar"
        assert order.shipping_address.street == order.billing_address.street
        assert not order.ships_to_billing_address

    def test_override_equal_to_billing(self):
        order = map_new_order(_order_payload(shipping_address_override=BILLING))
        assert order.ships_to_billing_address


class TestMapOrderPatch:
    def test_status_only(self):
        patch = map_order_patch(ORDER_ID, UpdateOrderDTO(status="Shipped"))
        assert patch.id == parse(ORDER_ID)
        assert patch.status == OrderStatus.SHIPPED
        assert patch.shipping_date is UNSET

    def test_with_shipping_date(self):
        dto = UpdateOrderDTO.model_validate(
            {"status": "placed", "shipping_date": "2026-12-24T08:00:00Z"}
        )
        patch = map_order_patch(ORDER_ID, dto)
        assert patch.changes() == {
            "status": OrderStatus.PLACED,
            "shipping_date": datetime(2026, 12, 24, 8, tzinfo=timezone.utc),
        }

    def test_unknown_status(self):
        with pytest.raises(InvalidEnumValue) as exc_info:
            map_order_patch(ORDER_ID, UpdateOrderDTO(status="returned"))
        assert exc_info.value.domain == "order_status"

    @pytest.mark.parametrize("status", ["placed", "shipped", "delivered", "canceled"])
    def test_any_status_is_accepted(self, status):
        assert map_order_patch(ORDER_ID, UpdateOrderDTO(status=status)).status == status

    def test_bad_target_id(self):
        with pytest.raises(InvalidIdentifier):
            map_order_patch("bad", UpdateOrderDTO(status="placed"))
