"""Catalog DTOs for the wire boundary.

Framework-agnostic data transfer objects using Pydantic v2.  Input DTOs
describe the request payloads exactly as the wire schema allows them; the
counts the mappers bound-check are ``StrictInt`` (no booleans, no numeric
strings).  The business invariants (identifier format, status vocabulary,
availability and discount bounds) are enforced afterwards by ``mappers.py``.
Output DTOs render domain entities via their ``from_entity`` factories.
DTOs are immutable (``frozen=True``).

- ``CreateAuthorDTO`` / ``UpdateAuthorDTO``: author payloads.
- ``CreateGenreDTO``: genre payload.
- ``CreateDiscountCodeDTO`` / ``UpdateDiscountCodeDTO``: discount payloads.
- ``CreateCatalogItemDTO`` / ``UpdateCatalogItemDTO``: book payloads.
- ``*OutputDTO``: response shapes.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from modules.catalog.constants import render_catalog_status
from modules.catalog.domain import Author, CatalogItem, DiscountCode, Genre
from shared.domain.identifiers import render

# Nominal range of the wire schema; the domain bound is tighter.
WIRE_PERCENTAGE_MIN = 0
WIRE_PERCENTAGE_MAX = 100


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateAuthorDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    first_name: str
    second_names: Optional[List[str]] = None
    last_name: str
    date_of_birth: date
    date_of_death: Optional[date] = None


class UpdateAuthorDTO(BaseModel):
    """All fields optional; ``null`` clears the nullable ones."""

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    first_name: Optional[str] = None
    second_names: Optional[List[str]] = None
    last_name: Optional[str] = None
    date_of_death: Optional[date] = None


class CreateGenreDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class CreateDiscountCodeDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    percentage_discount: StrictInt = Field(ge=WIRE_PERCENTAGE_MIN, le=WIRE_PERCENTAGE_MAX)
    valid_from: date
    valid_to: date
    code: str


class UpdateDiscountCodeDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    percentage_discount: Optional[StrictInt] = Field(
        default=None, ge=WIRE_PERCENTAGE_MIN, le=WIRE_PERCENTAGE_MAX
    )
    valid_from: Optional[date] = None
    valid_to: Optional[date] = None
    code: Optional[str] = None


class CreateCatalogItemDTO(BaseModel):
    """Book creation payload.

    No ``status`` field: unknown keys are ignored and new books always
    start as ``available``.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    release: date
    first_release: Optional[date] = None
    authors: List[str]
    genres: Optional[List[str]] = None
    discount_codes: Optional[List[str]] = None
    series: Optional[str] = None
    edition: Optional[int] = Field(default=None, ge=1)
    price: Decimal = Field(ge=0)
    available: StrictInt


class UpdateCatalogItemDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    release: Optional[date] = None
    first_release: Optional[date] = None
    authors: Optional[List[str]] = None
    genres: Optional[List[str]] = None
    discount_codes: Optional[List[str]] = None
    series: Optional[str] = None
    edition: Optional[int] = Field(default=None, ge=1)
    price: Optional[Decimal] = Field(default=None, ge=0)
    available: Optional[StrictInt] = None
    status: Optional[str] = None


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class AuthorOutputDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: Optional[str]
    first_name: str
    second_names: Optional[List[str]]
    last_name: str
    date_of_birth: date
    date_of_death: Optional[date]

    @classmethod
    def from_entity(cls, author: Author) -> AuthorOutputDTO:
        return cls(
            id=render(author.id),
            title=author.title,
            first_name=author.first_name,
            second_names=(
                list(author.second_names) if author.second_names is not None else None
            ),
            last_name=author.last_name,
            date_of_birth=author.date_of_birth,
            date_of_death=author.date_of_death,
        )


class GenreOutputDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str

    @classmethod
    def from_entity(cls, genre: Genre) -> GenreOutputDTO:
        return cls(id=render(genre.id), name=genre.name)


class DiscountCodeOutputDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    percentage_discount: int
    valid_from: date
    valid_to: date
    code: str

    @classmethod
    def from_entity(cls, discount: DiscountCode) -> DiscountCodeOutputDTO:
        return cls(
            id=render(discount.id),
            percentage_discount=discount.percentage_discount,
            valid_from=discount.valid_from,
            valid_to=discount.valid_to,
            code=discount.code,
        )


class CatalogItemOutputDTO(BaseModel):
    """Book response with authors, genres and discounts expanded."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    release: date
    first_release: date
    authors: List[AuthorOutputDTO]
    genres: Optional[List[GenreOutputDTO]]
    series: Optional[str]
    edition: int
    price: Decimal
    discounts: Optional[List[DiscountCodeOutputDTO]]
    available: int
    status: str

    @classmethod
    def from_entity(cls, item: CatalogItem) -> CatalogItemOutputDTO:
        genres = None
        if item.genres is not None:
            genres = [GenreOutputDTO.from_entity(g) for g in item.genres]

        discounts = None
        if item.discounts is not None:
            discounts = [DiscountCodeOutputDTO.from_entity(d) for d in item.discounts]

        return cls(
            id=render(item.id),
            title=item.title,
            release=item.release,
            first_release=item.first_release,
            authors=[AuthorOutputDTO.from_entity(a) for a in item.authors],
            genres=genres,
            series=item.series,
            edition=item.edition,
            price=item.price,
            discounts=discounts,
            available=item.available,
            status=render_catalog_status(item.status),
        )
