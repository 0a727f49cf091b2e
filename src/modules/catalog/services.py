"""Catalog service layer (Use Cases).

Stub implementation: no storage backs the catalog yet, so queries answer
with canned data, creations and updates echo what they receive and every
deletion fails (not found, or a genre still in use).  The service relies
on the inbound mappers having validated every input.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import List, Sequence

import structlog
from django.utils import timezone

from modules.catalog.constants import CatalogStatus
from modules.catalog.domain import (
    Author,
    AuthorPatch,
    CatalogItem,
    CatalogItemPatch,
    DiscountCode,
    DiscountCodePatch,
    Genre,
    NewCatalogItem,
)
from modules.catalog.exceptions import (
    AuthorNotFound,
    CatalogItemNotFound,
    DiscountCodeNotFound,
    GenreInUse,
)
from shared.domain.identifiers import Identifier, generate, render

logger = structlog.get_logger(__name__)

# Patch fields that can be applied to an expanded ``CatalogItem`` as-is.
_SCALAR_ITEM_FIELDS = (
    "title",
    "release",
    "first_release",
    "series",
    "edition",
    "price",
    "available",
    "status",
)


class CatalogService:
    """Application service for books, authors, genres and discount codes."""

    # ------------------------------------------------------------------
    # Books
    # ------------------------------------------------------------------

    def create_catalog_item(self, item: NewCatalogItem) -> CatalogItem:
        logger.info("catalog.item_created", item_id=render(item.id), title=item.title)
        return CatalogItem(
            id=item.id,
            title=item.title,
            release=item.release,
            first_release=item.first_release,
            series=item.series,
            edition=item.edition,
            price=item.price,
            available=item.available,
            status=item.status,
        )

    def get_catalog_item(self, item_id: Identifier) -> CatalogItem:
        logger.info("catalog.item_retrieved", item_id=render(item_id))
        return self._canned_item(item_id)

    def update_catalog_item(self, patch: CatalogItemPatch) -> CatalogItem:
        changes = patch.changes()
        item = replace(
            self._canned_item(patch.id),
            **{name: changes[name] for name in _SCALAR_ITEM_FIELDS if name in changes},
        )
        logger.info(
            "catalog.item_updated", item_id=render(patch.id), fields=sorted(changes)
        )
        return item

    def delete_catalog_item(self, item_id: Identifier) -> None:
        """Raises ``CatalogItemNotFound``: nothing is stored yet."""
        logger.warning("catalog.item_not_found", item_id=render(item_id))
        raise CatalogItemNotFound(f"Book {render(item_id)} not found.")

    def list_by_authors(self, author_ids: Sequence[Identifier]) -> List[CatalogItem]:
        author = self._canned_author(author_ids[0]) if author_ids else None
        item = self._canned_item(generate())
        if author is not None:
            item = replace(item, authors=(author,))
        return [item]

    def list_by_genres(self, genre_ids: Sequence[Identifier]) -> List[CatalogItem]:
        genres = tuple(Genre(id=genre_id, name="Fiction") for genre_id in genre_ids)
        return [replace(self._canned_item(generate()), genres=genres)]

    def list_by_status(self, statuses: Sequence[CatalogStatus]) -> List[CatalogItem]:
        return [replace(self._canned_item(generate()), status=s) for s in statuses]

    # ------------------------------------------------------------------
    # Authors
    # ------------------------------------------------------------------

    def create_author(self, author: Author) -> Author:
        logger.info("catalog.author_created", author_id=render(author.id))
        return author

    def get_author(self, author_id: Identifier) -> Author:
        return self._canned_author(author_id)

    def update_author(self, patch: AuthorPatch) -> Author:
        changes = patch.changes()
        logger.info(
            "catalog.author_updated", author_id=render(patch.id), fields=sorted(changes)
        )
        return replace(self._canned_author(patch.id), **changes)

    def delete_author(self, author_id: Identifier) -> None:
        logger.warning("catalog.author_not_found", author_id=render(author_id))
        raise AuthorNotFound(f"Author {render(author_id)} not found.")

    # ------------------------------------------------------------------
    # Genres
    # ------------------------------------------------------------------

    def create_genre(self, genre: Genre) -> Genre:
        logger.info("catalog.genre_created", genre_id=render(genre.id), name=genre.name)
        return genre

    def get_genre(self, genre_id: Identifier) -> Genre:
        return Genre(id=genre_id, name="Fiction")

    def delete_genre(self, genre_id: Identifier) -> None:
        """Raises ``GenreInUse``: every genre is assumed referenced by a book."""
        logger.warning("catalog.genre_in_use", genre_id=render(genre_id))
        raise GenreInUse(f"Genre {render(genre_id)} is still assigned to books.")

    # ------------------------------------------------------------------
    # Discount codes
    # ------------------------------------------------------------------

    def create_discount_code(self, discount: DiscountCode) -> DiscountCode:
        logger.info("catalog.discount_created", discount_id=render(discount.id))
        return discount

    def get_discount_code(self, discount_id: Identifier) -> DiscountCode:
        return self._canned_discount(discount_id)

    def update_discount_code(self, patch: DiscountCodePatch) -> DiscountCode:
        changes = patch.changes()
        logger.info(
            "catalog.discount_updated",
            discount_id=render(patch.id),
            fields=sorted(changes),
        )
        return replace(self._canned_discount(patch.id), **changes)

    def delete_discount_code(self, discount_id: Identifier) -> None:
        logger.warning("catalog.discount_not_found", discount_id=render(discount_id))
        raise DiscountCodeNotFound(f"Discount code {render(discount_id)} not found.")

    # ------------------------------------------------------------------
    # Canned data
    # ------------------------------------------------------------------

    @staticmethod
    def _canned_item(item_id: Identifier) -> CatalogItem:
        today = timezone.now().date()
        return CatalogItem(
            id=item_id,
            title="The best book",
            release=today,
            first_release=today,
            series="1",
            edition=1,
            price=Decimal("12.50"),
            available=2,
            status=CatalogStatus.AVAILABLE,
        )

    @staticmethod
    def _canned_author(author_id: Identifier) -> Author:
        return Author(
            id=author_id,
            first_name="Johann",
            second_names=("Wolfgang",),
            last_name="Goethe",
            date_of_birth=date(1749, 8, 28),
            date_of_death=date(1832, 3, 22),
        )

    @staticmethod
    def _canned_discount(discount_id: Identifier) -> DiscountCode:
        today = timezone.now().date()
        return DiscountCode(
            id=discount_id,
            percentage_discount=10,
            valid_from=today,
            valid_to=today,
            code="WELCOME10",
        )
