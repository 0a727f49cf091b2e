"""Catalog service exceptions.

Raised by the catalog service, never by the mappers.  The API layer
(Views) catches these and translates them into HTTP responses:
not-found errors become 404, ``GenreInUse`` becomes 409.
"""

from __future__ import annotations


class CatalogItemNotFound(Exception):
    """The requested book does not exist."""


class AuthorNotFound(Exception):
    """The requested author does not exist."""


class DiscountCodeNotFound(Exception):
    """The requested discount code does not exist."""


class GenreInUse(Exception):
    """The genre is still referenced by books and cannot be deleted."""
