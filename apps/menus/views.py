from django.shortcuts import get_object_or_404
from drf_spectacular.utils import extend_schema
from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.constants import STAFF_ROLES
from apps.common.mixins import PermissionMixin
from apps.common.utils import PUBLIC
from apps.menus import services
from apps.menus.models import Category, InventoryLog, MenuItem
from apps.menus.serializers import (
    CategorySerializer,
    InventoryLogSerializer,
    MenuItemSerializer,
    RestockSerializer,
)


# --- Items ---
@extend_schema(summary="List menu items or create one")
class MenuItemListView(PermissionMixin, generics.ListCreateAPIView):
    required_roles = {"GET": PUBLIC, "POST": STAFF_ROLES}
    serializer_class = MenuItemSerializer
    queryset = MenuItem.objects.select_related("category")
    filterset_fields = ["category", "availability"]


@extend_schema(summary="Get, replace or delete a menu item")
class MenuItemDetailView(PermissionMixin, generics.RetrieveUpdateDestroyAPIView):
    required_roles = {"GET": PUBLIC, "PUT": STAFF_ROLES, "PATCH": STAFF_ROLES, "DELETE": STAFF_ROLES}
    serializer_class = MenuItemSerializer
    queryset = MenuItem.objects.select_related("category")

    def perform_destroy(self, instance):
        services.delete_item(instance)


@extend_schema(summary="Staff: add stock to a limited item", request=RestockSerializer, responses={200: MenuItemSerializer})
class RestockView(PermissionMixin, APIView):
    required_roles = STAFF_ROLES

    def post(self, request, pk):
        serializer = RestockSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item = get_object_or_404(MenuItem, pk=pk)
        item = services.restock(item.pk, staff_id=request.user.id, **serializer.validated_data)
        return Response(MenuItemSerializer(item).data, status=status.HTTP_200_OK)


@extend_schema(summary="Staff: inventory change history")
class InventoryLogListView(PermissionMixin, generics.ListAPIView):
    required_roles = STAFF_ROLES
    serializer_class = InventoryLogSerializer
    queryset = InventoryLog.objects.select_related("item")
    filterset_fields = ["item", "change_type"]


# --- Categories ---
@extend_schema(summary="List categories with their items or create one")
class CategoryListView(PermissionMixin, generics.ListCreateAPIView):
    required_roles = {"GET": PUBLIC, "POST": STAFF_ROLES}
    serializer_class = CategorySerializer
    queryset = Category.objects.prefetch_related("items")


@extend_schema(summary="Get, update or delete a category")
class CategoryDetailView(PermissionMixin, generics.RetrieveUpdateDestroyAPIView):
    required_roles = {"GET": PUBLIC, "PUT": STAFF_ROLES, "PATCH": STAFF_ROLES, "DELETE": STAFF_ROLES}
    serializer_class = CategorySerializer
    queryset = Category.objects.prefetch_related("items")
