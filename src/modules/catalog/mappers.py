"""Inbound mapping for the catalog context.

Turns validated wire DTOs into domain entities and patches.  Each function
is pure except for identifier generation, which is injected through
``generate_id`` so tests can pin identifiers.

Validation order is fixed so that the reported error is deterministic:
identifiers first, then nested collections element-wise in declaration
order, then scalar bounds, then enumerations.  The first failure aborts the
conversion.

Raises (all subclasses of ``MappingError``):
    InvalidIdentifier, InvalidEnumValue, AvailabilityOutOfBounds,
    DiscountPercentageOutOfBounds.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from modules.catalog.constants import (
    DEFAULT_EDITION,
    INITIAL_CATALOG_STATUS,
    CatalogStatus,
    parse_catalog_status,
    parse_catalog_statuses,
)
from modules.catalog.domain import (
    Author,
    AuthorPatch,
    CatalogItemPatch,
    DiscountCode,
    DiscountCodePatch,
    Genre,
    NewCatalogItem,
)
from modules.catalog.dtos import (
    CreateAuthorDTO,
    CreateCatalogItemDTO,
    CreateDiscountCodeDTO,
    CreateGenreDTO,
    UpdateAuthorDTO,
    UpdateCatalogItemDTO,
    UpdateDiscountCodeDTO,
)
from shared.domain.errors import AvailabilityOutOfBounds, DiscountPercentageOutOfBounds
from shared.domain.identifiers import (
    Identifier,
    IdentifierGenerator,
    generate,
    parse,
    parse_many,
)
from shared.domain.patches import is_set, supplied

# ---------------------------------------------------------------------------
# Field checks
# ---------------------------------------------------------------------------


def _identifiers(texts: Optional[Iterable[str]]) -> Optional[Tuple[Identifier, ...]]:
    if texts is None:
        return None
    return tuple(parse_many(texts))


def _check_available(value: int) -> int:
    if value < AvailabilityOutOfBounds.minimum:
        raise AvailabilityOutOfBounds(value)
    return value


def _check_percentage(value: int) -> int:
    if not (
        DiscountPercentageOutOfBounds.minimum
        <= value
        <= DiscountPercentageOutOfBounds.maximum
    ):
        raise DiscountPercentageOutOfBounds(value)
    return value


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------


def map_new_author(
    dto: CreateAuthorDTO, generate_id: IdentifierGenerator = generate
) -> Author:
    return Author(
        id=generate_id(),
        title=dto.title,
        first_name=dto.first_name,
        second_names=tuple(dto.second_names) if dto.second_names is not None else None,
        last_name=dto.last_name,
        date_of_birth=dto.date_of_birth,
        date_of_death=dto.date_of_death,
    )


def map_new_genre(dto: CreateGenreDTO, generate_id: IdentifierGenerator = generate) -> Genre:
    return Genre(id=generate_id(), name=dto.name)


def map_new_discount_code(
    dto: CreateDiscountCodeDTO, generate_id: IdentifierGenerator = generate
) -> DiscountCode:
    """Map a discount payload, enforcing the [1, 80] percentage bound."""
    percentage = _check_percentage(dto.percentage_discount)
    return DiscountCode(
        id=generate_id(),
        percentage_discount=percentage,
        valid_from=dto.valid_from,
        valid_to=dto.valid_to,
        code=dto.code,
    )


def map_new_catalog_item(
    dto: CreateCatalogItemDTO, generate_id: IdentifierGenerator = generate
) -> NewCatalogItem:
    """Map a book creation payload.

    Author, genre and discount ids are parsed in that order, then the
    available count is checked.  ``edition`` defaults to 1 and
    ``first_release`` to ``release``.  The status is always ``available``.
    """
    authors = tuple(parse_many(dto.authors))
    genres = _identifiers(dto.genres)
    discounts = _identifiers(dto.discount_codes)
    available = _check_available(dto.available)

    return NewCatalogItem(
        id=generate_id(),
        title=dto.title,
        release=dto.release,
        first_release=dto.first_release if dto.first_release is not None else dto.release,
        authors=authors,
        genres=genres,
        discounts=discounts,
        series=dto.series,
        edition=dto.edition if dto.edition is not None else DEFAULT_EDITION,
        price=dto.price,
        available=available,
        status=INITIAL_CATALOG_STATUS,
    )


# ---------------------------------------------------------------------------
# Patches
# ---------------------------------------------------------------------------


def map_author_patch(author_id: str, dto: UpdateAuthorDTO) -> AuthorPatch:
    """Only the target id is validated; other fields pass through."""
    second_names = supplied(dto, "second_names", clearable=True)
    if is_set(second_names) and second_names is not None:
        second_names = tuple(second_names)
    return AuthorPatch(
        id=parse(author_id),
        title=supplied(dto, "title", clearable=True),
        first_name=supplied(dto, "first_name"),
        second_names=second_names,
        last_name=supplied(dto, "last_name"),
        date_of_death=supplied(dto, "date_of_death", clearable=True),
    )


def map_catalog_item_patch(item_id: str, dto: UpdateCatalogItemDTO) -> CatalogItemPatch:
    """Validate each supplied field independently, in declaration order."""
    target = parse(item_id)

    authors = supplied(dto, "authors")
    if is_set(authors):
        authors = tuple(parse_many(authors))

    genres = supplied(dto, "genres", clearable=True)
    if is_set(genres):
        genres = _identifiers(genres)

    discounts = supplied(dto, "discount_codes", clearable=True)
    if is_set(discounts):
        discounts = _identifiers(discounts)

    available = supplied(dto, "available")
    if is_set(available):
        available = _check_available(available)

    status = supplied(dto, "status")
    if is_set(status):
        status = parse_catalog_status(status)

    return CatalogItemPatch(
        id=target,
        title=supplied(dto, "title"),
        release=supplied(dto, "release"),
        first_release=supplied(dto, "first_release"),
        authors=authors,
        genres=genres,
        discounts=discounts,
        series=supplied(dto, "series", clearable=True),
        edition=supplied(dto, "edition"),
        price=supplied(dto, "price"),
        available=available,
        status=status,
    )


def map_discount_code_patch(discount_id: str, dto: UpdateDiscountCodeDTO) -> DiscountCodePatch:
    target = parse(discount_id)

    percentage = supplied(dto, "percentage_discount")
    if is_set(percentage):
        percentage = _check_percentage(percentage)

    return DiscountCodePatch(
        id=target,
        percentage_discount=percentage,
        valid_from=supplied(dto, "valid_from"),
        valid_to=supplied(dto, "valid_to"),
        code=supplied(dto, "code"),
    )


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------


def map_identifier_filter(texts: Iterable[str]) -> List[Identifier]:
    """Parse an id list filter (books by authors / by genres)."""
    return parse_many(texts)


def map_status_filter(texts: Iterable[str]) -> List[CatalogStatus]:
    """Parse a status list filter; the first unknown status fails the batch."""
    return parse_catalog_statuses(texts)
