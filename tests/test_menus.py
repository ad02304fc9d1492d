from decimal import Decimal

import pytest

from apps.common.constants import InventoryChangeType
from apps.menus.models import Category, InventoryLog, MenuItem

pytestmark = pytest.mark.django_db


class TestMenuItems:
    def test_list_is_public_and_filterable(self, api_client, item_a, item_b):
        item_b.availability = False
        item_b.save()

        resp = api_client.get("/menu", {"availability": "true"})

        assert resp.status_code == 200
        assert [row["name"] for row in resp.json()["results"]] == [item_a.name]

    def test_get_one(self, api_client, item_a):
        resp = api_client.get(f"/menu/{item_a.id}")

        assert resp.status_code == 200
        assert resp.json()["price"] == "50.00"
        assert resp.json()["stock_limit"] == 5
        assert resp.json()["category"]["name"] == "Rice Meals"

    def test_create_with_category(self, staff_client, category):
        resp = staff_client.post(
            "/menu",
            {"name": "Lumpia", "price": "15.50", "stock_limit": 30, "category_id": str(category.id)},
            format="json",
        )

        assert resp.status_code == 201
        item = MenuItem.objects.get(name="Lumpia")
        assert item.price == Decimal("15.50")
        assert item.category == category
        assert item.availability is True

    def test_negative_price_is_rejected(self, staff_client):
        resp = staff_client.post("/menu", {"name": "Free Lunch", "price": "-1.00"}, format="json")
        assert resp.status_code == 400

    def test_update(self, staff_client, item_a):
        resp = staff_client.put(
            f"/menu/{item_a.id}",
            {"name": "Pork Adobo", "price": "55.00", "availability": False},
            format="json",
        )

        assert resp.status_code == 200
        item_a.refresh_from_db()
        assert item_a.name == "Pork Adobo"
        assert item_a.price == Decimal("55.00")
        assert item_a.availability is False

    def test_delete_unreferenced_item(self, staff_client, item_b):
        assert staff_client.delete(f"/menu/{item_b.id}").status_code == 204
        assert not MenuItem.objects.filter(pk=item_b.id).exists()

    def test_delete_item_with_order_lines_is_400(self, staff_client, place_order, item_a):
        place_order()

        resp = staff_client.delete(f"/menu/{item_a.id}")

        assert resp.status_code == 400
        assert MenuItem.objects.filter(pk=item_a.id).exists()

    def test_student_cannot_delete(self, student_client, item_b):
        assert student_client.delete(f"/menu/{item_b.id}").status_code == 403


class TestCategories:
    def test_list_nests_items(self, api_client, item_a, item_b):
        resp = api_client.get("/menu/categories")

        assert resp.status_code == 200
        (category,) = resp.json()["results"]
        assert sorted(item["name"] for item in category["items"]) == ["Chicken Adobo", "Iced Tea"]

    def test_duplicate_name_is_rejected(self, staff_client, category):
        resp = staff_client.post("/menu/categories", {"name": category.name}, format="json")
        assert resp.status_code == 400

    def test_delete_keeps_items(self, staff_client, category, item_a):
        assert staff_client.delete(f"/menu/categories/{category.id}").status_code == 204

        item_a.refresh_from_db()
        assert item_a.category is None
        assert not Category.objects.exists()


class TestInventory:
    def test_restock_adds_stock_and_logs_actor(self, staff_client, staff, item_a):
        resp = staff_client.post(f"/menu/{item_a.id}/restock", {"quantity": 3, "note": "Morning batch"}, format="json")

        assert resp.status_code == 200
        assert resp.json()["stock_limit"] == 8
        log = InventoryLog.objects.get(item=item_a)
        assert log.change_type == InventoryChangeType.RESTOCK
        assert log.quantity == 3
        assert log.staff_id == staff.id
        assert log.note == "Morning batch"

    def test_restock_unlimited_item_is_400(self, staff_client, item_b):
        resp = staff_client.post(f"/menu/{item_b.id}/restock", {"quantity": 3}, format="json")

        assert resp.status_code == 400
        assert not InventoryLog.objects.exists()

    def test_restock_needs_positive_quantity(self, staff_client, item_a):
        assert staff_client.post(f"/menu/{item_a.id}/restock", {"quantity": 0}, format="json").status_code == 400

    def test_inventory_logs_are_staff_only_and_filterable(self, staff_client, student_client, place_order, item_a):
        place_order()
        staff_client.post(f"/menu/{item_a.id}/restock", {"quantity": 1}, format="json")

        assert student_client.get("/menu/inventory-logs").status_code == 403

        resp = staff_client.get("/menu/inventory-logs", {"change_type": "deduct"})
        assert resp.status_code == 200
        assert len(resp.json()["results"]) == 2
        assert {row["change_type"] for row in resp.json()["results"]} == {"deduct"}
