"""Catalog domain constants.

Defines the catalog-item status vocabulary.  The values are part of the
public wire protocol and must not change spelling or casing.
"""

from __future__ import annotations

from typing import Iterable, List

from django.db import models

from shared.domain.vocabulary import parse_choice, parse_choices, render_choice

CATALOG_STATUS_DOMAIN = "catalog_status"

DEFAULT_EDITION = 1


class CatalogStatus(models.TextChoices):
    AVAILABLE = "available", "Available"
    OUT_OF_STOCK = "out_of_stock", "Out of stock"
    RE_ORDERED = "re_ordered", "Re-ordered"


# New catalog items always start here, whatever the payload says.
INITIAL_CATALOG_STATUS = CatalogStatus.AVAILABLE


def parse_catalog_status(raw: str) -> CatalogStatus:
    return parse_choice(CatalogStatus, CATALOG_STATUS_DOMAIN, raw)


def parse_catalog_statuses(raws: Iterable[str]) -> List[CatalogStatus]:
    return parse_choices(CatalogStatus, CATALOG_STATUS_DOMAIN, raws)


def render_catalog_status(status: CatalogStatus) -> str:
    return render_choice(status)
