"""Catalog URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.catalog.views import (
    AuthorViewSet,
    BookViewSet,
    DiscountCodeViewSet,
    GenreViewSet,
)

router = DefaultRouter(trailing_slash=True)
router.register("books", BookViewSet, basename="book")
router.register("authors", AuthorViewSet, basename="author")
router.register("genres", GenreViewSet, basename="genre")
router.register("discounts", DiscountCodeViewSet, basename="discount")

urlpatterns = router.urls
