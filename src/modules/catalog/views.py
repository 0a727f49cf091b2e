"""Catalog API views.

Exposes the ``CatalogService`` via HTTP using DRF ViewSets.  Request bodies
are validated into Pydantic DTOs and converted by ``mappers.py``; mapping
errors propagate to the project exception handler (HTTP 400).  Service
errors are translated here: not-found into 404, a genre still in use into
409.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.catalog.dtos import (
    AuthorOutputDTO,
    CatalogItemOutputDTO,
    CreateAuthorDTO,
    CreateCatalogItemDTO,
    CreateDiscountCodeDTO,
    CreateGenreDTO,
    DiscountCodeOutputDTO,
    GenreOutputDTO,
    UpdateAuthorDTO,
    UpdateCatalogItemDTO,
    UpdateDiscountCodeDTO,
)
from modules.catalog.exceptions import (
    AuthorNotFound,
    CatalogItemNotFound,
    DiscountCodeNotFound,
    GenreInUse,
)
from modules.catalog.mappers import (
    map_author_patch,
    map_catalog_item_patch,
    map_discount_code_patch,
    map_identifier_filter,
    map_new_author,
    map_new_catalog_item,
    map_new_discount_code,
    map_new_genre,
    map_status_filter,
)
from modules.catalog.services import CatalogService
from shared.domain.identifiers import parse


def _not_found(exc: Exception) -> Response:
    return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)


def _items(items) -> list:
    return [CatalogItemOutputDTO.from_entity(item).model_dump(mode="json") for item in items]


class CatalogViewSet(GenericViewSet):
    """Base ViewSet wiring a ``CatalogService`` instance."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CatalogService()


class BookViewSet(CatalogViewSet):
    """Books: create, retrieve, patch, delete and the ``find-by-*`` queries."""

    def create(self, request: Request) -> Response:
        """POST /api/v1/books/"""
        dto = CreateCatalogItemDTO.model_validate(request.data)
        item = self._service.create_catalog_item(map_new_catalog_item(dto))
        out = CatalogItemOutputDTO.from_entity(item)
        return Response(out.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/books/{pk}/"""
        item = self._service.get_catalog_item(parse(pk))
        return Response(CatalogItemOutputDTO.from_entity(item).model_dump(mode="json"))

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/books/{pk}/

        Only the fields present in the body are changed.
        """
        dto = UpdateCatalogItemDTO.model_validate(request.data)
        patch = map_catalog_item_patch(pk, dto)
        item = self._service.update_catalog_item(patch)
        return Response(CatalogItemOutputDTO.from_entity(item).model_dump(mode="json"))

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/books/{pk}/"""
        try:
            self._service.delete_catalog_item(parse(pk))
        except CatalogItemNotFound as exc:
            return _not_found(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["get"], url_path="find-by-authors")
    def find_by_authors(self, request: Request) -> Response:
        """GET /api/v1/books/find-by-authors/?authors=<id>&authors=<id>"""
        author_ids = map_identifier_filter(request.query_params.getlist("authors"))
        return Response(_items(self._service.list_by_authors(author_ids)))

    @action(detail=False, methods=["get"], url_path="find-by-genres")
    def find_by_genres(self, request: Request) -> Response:
        """GET /api/v1/books/find-by-genres/?genres=<id>&genres=<id>"""
        genre_ids = map_identifier_filter(request.query_params.getlist("genres"))
        return Response(_items(self._service.list_by_genres(genre_ids)))

    @action(detail=False, methods=["get"], url_path="find-by-status")
    def find_by_status(self, request: Request) -> Response:
        """GET /api/v1/books/find-by-status/?status=available&status=re_ordered"""
        statuses = map_status_filter(request.query_params.getlist("status"))
        return Response(_items(self._service.list_by_status(statuses)))


class AuthorViewSet(CatalogViewSet):
    def create(self, request: Request) -> Response:
        dto = CreateAuthorDTO.model_validate(request.data)
        author = self._service.create_author(map_new_author(dto))
        out = AuthorOutputDTO.from_entity(author)
        return Response(out.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        author = self._service.get_author(parse(pk))
        return Response(AuthorOutputDTO.from_entity(author).model_dump(mode="json"))

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        dto = UpdateAuthorDTO.model_validate(request.data)
        patch = map_author_patch(pk, dto)
        author = self._service.update_author(patch)
        return Response(AuthorOutputDTO.from_entity(author).model_dump(mode="json"))

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        try:
            self._service.delete_author(parse(pk))
        except AuthorNotFound as exc:
            return _not_found(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)


class GenreViewSet(CatalogViewSet):
    def create(self, request: Request) -> Response:
        dto = CreateGenreDTO.model_validate(request.data)
        genre = self._service.create_genre(map_new_genre(dto))
        out = GenreOutputDTO.from_entity(genre)
        return Response(out.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        genre = self._service.get_genre(parse(pk))
        return Response(GenreOutputDTO.from_entity(genre).model_dump(mode="json"))

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        try:
            self._service.delete_genre(parse(pk))
        except GenreInUse as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)
        return Response(status=status.HTTP_204_NO_CONTENT)


class DiscountCodeViewSet(CatalogViewSet):
    def create(self, request: Request) -> Response:
        dto = CreateDiscountCodeDTO.model_validate(request.data)
        discount = self._service.create_discount_code(map_new_discount_code(dto))
        out = DiscountCodeOutputDTO.from_entity(discount)
        return Response(out.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        discount = self._service.get_discount_code(parse(pk))
        return Response(DiscountCodeOutputDTO.from_entity(discount).model_dump(mode="json"))

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        dto = UpdateDiscountCodeDTO.model_validate(request.data)
        patch = map_discount_code_patch(pk, dto)
        discount = self._service.update_discount_code(patch)
        return Response(DiscountCodeOutputDTO.from_entity(discount).model_dump(mode="json"))

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        try:
            self._service.delete_discount_code(parse(pk))
        except DiscountCodeNotFound as exc:
            return _not_found(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)
