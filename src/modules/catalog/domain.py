"""Catalog domain entities.

Frozen dataclasses consumed and produced by the catalog service.  They are
built by the inbound mappers (``mappers.py``) from validated wire payloads
and rendered by the output DTOs (``dtos.py``).

- ``Author``, ``Genre``, ``DiscountCode``: catalog reference entities.
- ``NewCatalogItem``: a book about to be created (related entities by id).
- ``CatalogItem``: a book as returned by queries (related entities expanded).
- ``*Patch``: partial updates; omitted fields are ``UNSET``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Optional, Tuple

from modules.catalog.constants import CatalogStatus
from shared.domain.identifiers import Identifier
from shared.domain.patches import UNSET, PatchMixin


@dataclass(frozen=True)
class Author:
    id: Identifier
    first_name: str
    last_name: str
    date_of_birth: date
    title: Optional[str] = None
    second_names: Optional[Tuple[str, ...]] = None
    date_of_death: Optional[date] = None


@dataclass(frozen=True)
class Genre:
    id: Identifier
    name: str


@dataclass(frozen=True)
class DiscountCode:
    """Discount code; ``percentage_discount`` is always within [1, 80]."""

    id: Identifier
    percentage_discount: int
    valid_from: date
    valid_to: date
    code: str


@dataclass(frozen=True)
class NewCatalogItem:
    """A book accepted for creation, referencing related entities by id."""

    id: Identifier
    title: str
    release: date
    first_release: date
    authors: Tuple[Identifier, ...]
    price: Decimal
    available: int
    edition: int
    status: CatalogStatus
    series: Optional[str] = None
    genres: Optional[Tuple[Identifier, ...]] = None
    discounts: Optional[Tuple[Identifier, ...]] = None


@dataclass(frozen=True)
class CatalogItem:
    """A book with authors, genres and discount codes expanded."""

    id: Identifier
    title: str
    release: date
    first_release: date
    price: Decimal
    available: int
    edition: int
    status: CatalogStatus
    authors: Tuple[Author, ...] = field(default_factory=tuple)
    series: Optional[str] = None
    genres: Optional[Tuple[Genre, ...]] = None
    discounts: Optional[Tuple[DiscountCode, ...]] = None


# ---------------------------------------------------------------------------
# Patches
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AuthorPatch(PatchMixin):
    id: Identifier
    title: Any = UNSET
    first_name: Any = UNSET
    second_names: Any = UNSET
    last_name: Any = UNSET
    date_of_death: Any = UNSET


@dataclass(frozen=True)
class CatalogItemPatch(PatchMixin):
    id: Identifier
    title: Any = UNSET
    release: Any = UNSET
    first_release: Any = UNSET
    authors: Any = UNSET
    genres: Any = UNSET
    discounts: Any = UNSET
    series: Any = UNSET
    edition: Any = UNSET
    price: Any = UNSET
    available: Any = UNSET
    status: Any = UNSET


@dataclass(frozen=True)
class DiscountCodePatch(PatchMixin):
    id: Identifier
    percentage_discount: Any = UNSET
    valid_from: Any = UNSET
    valid_to: Any = UNSET
    code: Any = UNSET
