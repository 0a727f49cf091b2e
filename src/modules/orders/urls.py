"""Order URL configuration."""

from __future__ import annotations

from django.urls import path
from rest_framework.routers import DefaultRouter

from modules.orders.views import InventoryView, OrderViewSet

router = DefaultRouter(trailing_slash=True)
router.register("store/orders", OrderViewSet, basename="order")

urlpatterns = [
    path("store/inventory/", InventoryView.as_view(), name="inventory"),
    *router.urls,
]
