import uuid

import pytest

from apps.common.constants import CustomerType, OrderStatus, PaymentStatus
from apps.payments.models import Payment

pytestmark = pytest.mark.django_db


class TestRecordPayment:
    def test_without_order_due_equals_received(self, staff_client, staff):
        resp = staff_client.post("/payments", {"amount_received": "100"}, format="json")

        assert resp.status_code == 201
        body = resp.json()
        assert body["amount_due"] == "100.00"
        assert body["change"] == "0.00"
        assert body["order"] is None
        assert body["payment_method"] == "cash"
        assert body["processed_by"] == str(staff.id)

    def test_with_order_marks_it_paid_and_picked_up(self, staff_client, place_order):
        order = place_order()

        resp = staff_client.post(
            "/payments",
            {
                "order_id": str(order.id),
                "amount_received": "150.00",
                "payment_method": "gcash",
                "customer_name": "Juan",
                "customer_type": "student",
            },
            format="json",
        )

        assert resp.status_code == 201
        assert resp.json()["amount_due"] == "120.00"
        assert resp.json()["change"] == "30.00"
        order.refresh_from_db()
        assert order.payment_status == PaymentStatus.PAID
        assert order.status == OrderStatus.PICKED_UP
        assert order.customer_name == "Juan"
        assert order.customer_type == CustomerType.STUDENT

    def test_underpayment_is_recorded_as_negative_change(self, staff_client, place_order):
        order = place_order()

        resp = staff_client.post("/payments", {"order_id": str(order.id), "amount_received": "100.00"}, format="json")

        assert resp.status_code == 201
        assert resp.json()["change"] == "-20.00"

    def test_unknown_order_is_404(self, staff_client):
        resp = staff_client.post("/payments", {"order_id": str(uuid.uuid4()), "amount_received": "10"}, format="json")

        assert resp.status_code == 404
        assert not Payment.objects.exists()

    @pytest.mark.parametrize("payload", [{}, {"amount_received": "0"}, {"amount_received": "0.00"}])
    def test_amount_received_is_required(self, staff_client, payload):
        assert staff_client.post("/payments", payload, format="json").status_code == 400

    def test_students_cannot_record_payments(self, student_client):
        assert student_client.post("/payments", {"amount_received": "10"}, format="json").status_code == 403


class TestReadAndDelete:
    def test_list_and_get(self, staff_client, admin_client):
        created = staff_client.post("/payments", {"amount_received": "25.00"}, format="json").json()

        listing = admin_client.get("/payments")
        assert listing.status_code == 200
        assert [row["id"] for row in listing.json()["results"]] == [created["id"]]

        assert staff_client.get(f"/payments/{created['id']}").json()["amount_received"] == "25.00"

    def test_only_admin_deletes_and_order_stays_paid(self, staff_client, admin_client, place_order):
        order = place_order()
        payment_id = staff_client.post(
            "/payments", {"order_id": str(order.id), "amount_received": "120.00"}, format="json"
        ).json()["id"]

        assert staff_client.delete(f"/payments/{payment_id}").status_code == 403
        assert admin_client.delete(f"/payments/{payment_id}").status_code == 204

        assert not Payment.objects.exists()
        order.refresh_from_db()
        # removing the ledger entry does not revert the order
        assert order.payment_status == PaymentStatus.PAID
        assert order.status == OrderStatus.PICKED_UP
