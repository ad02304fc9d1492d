from django.urls import path

from . import views

app_name = "menus"

urlpatterns = [
    # --- Categories ---
    path("menu/categories", views.CategoryListView.as_view(), name="category_list"),  # GET list, POST create
    path("menu/categories/<uuid:pk>", views.CategoryDetailView.as_view(), name="category_detail"),
    # --- Inventory ---
    path("menu/inventory-logs", views.InventoryLogListView.as_view(), name="inventory_logs"),
    # --- Items ---
    path("menu", views.MenuItemListView.as_view(), name="item_list"),  # GET list, POST create
    path("menu/<uuid:pk>", views.MenuItemDetailView.as_view(), name="item_detail"),  # GET, PUT, DELETE
    path("menu/<uuid:pk>/restock", views.RestockView.as_view(), name="item_restock"),
]
