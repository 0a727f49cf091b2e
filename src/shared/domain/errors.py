"""Mapping error taxonomy.

Raised by the inbound mappers when an untrusted wire payload cannot be
turned into a valid domain value.  Every subclass carries the offending
input and an underlying ``cause`` (also chained as ``__cause__``).

The API layer translates each class into a wire-level failure category via
``modules.core.exception_handler``.  A new validation rule gets a new
subclass; existing ones are never reused for a different rule.
"""

from __future__ import annotations

from typing import Any, Optional


class MappingError(Exception):
    """Base class for every wire -> domain mapping failure."""

    code = "invalid_input"

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause

    @property
    def detail(self) -> str:
        return str(self)


class InvalidIdentifier(MappingError):
    """The text is not a well-formed KSUID."""

    code = "invalid_identifier"

    def __init__(self, raw_input: Any, cause: BaseException) -> None:
        super().__init__(f"Invalid KSUID format: {raw_input!r}", cause)
        self.raw_input = raw_input


class InvalidEnumValue(MappingError):
    """The text is not a member of a closed status vocabulary."""

    code = "invalid_enum_value"

    def __init__(self, domain: str, raw_value: Any) -> None:
        cause = ValueError(f"{raw_value!r} is not a valid {domain}")
        super().__init__(f"Invalid {domain.replace('_', ' ')}: {raw_value!r}", cause)
        self.domain = domain
        self.raw_value = raw_value


class AvailabilityOutOfBounds(MappingError):
    """A catalog item's available count is negative."""

    code = "availability_out_of_bounds"
    minimum = 0

    def __init__(self, value: int) -> None:
        cause = ValueError(f"Invalid number of books available: {value}")
        super().__init__(
            f"Invalid available count: {value}. Minimum is {self.minimum}.", cause
        )
        self.value = value


class DiscountPercentageOutOfBounds(MappingError):
    """A discount percentage falls outside [1, 80]."""

    code = "discount_percentage_out_of_bounds"
    minimum = 1
    maximum = 80

    def __init__(self, value: int) -> None:
        cause = ValueError(
            f"Discount percentage {value} is outside [{self.minimum}, {self.maximum}]"
        )
        super().__init__(
            f"Invalid discount percentage: {value}. "
            f"Allowed range is {self.minimum}% to {self.maximum}%.",
            cause,
        )
        self.value = value


class OrderQuantityOutOfBounds(MappingError):
    """An order line asks for fewer than one item."""

    code = "order_quantity_out_of_bounds"
    minimum = 1

    def __init__(self, value: int) -> None:
        cause = ValueError(f"Invalid order quantity: {value}")
        super().__init__(
            f"Invalid quantity for order: {value}. Minimum is {self.minimum}.", cause
        )
        self.value = value


MAPPING_ERRORS: tuple[type[MappingError], ...] = (
    InvalidIdentifier,
    InvalidEnumValue,
    AvailabilityOutOfBounds,
    DiscountPercentageOutOfBounds,
    OrderQuantityOutOfBounds,
)
