from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from apps.authentication.utils import generate_token_for_user
from apps.common.constants import UserRole
from apps.menus.models import Category, MenuItem
from apps.orders import services as order_services

User = get_user_model()

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def _fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(role=UserRole.STUDENT, **extra):
        counter["n"] += 1
        extra.setdefault("email", f"{role}{counter['n']}@campus.test")
        extra.setdefault("full_name", f"{role.label} {counter['n']}")
        extra.setdefault("approved", True)
        return User.objects.create_user(password=PASSWORD, role=role, **extra)

    return _make


@pytest.fixture
def student(make_user):
    return make_user(UserRole.STUDENT, email="student@campus.test", student_id="2024-0001")


@pytest.fixture
def other_student(make_user):
    return make_user(UserRole.STUDENT, email="other@campus.test")


@pytest.fixture
def staff(make_user):
    return make_user(UserRole.STAFF, email="staff@campus.test")


@pytest.fixture
def pending_staff(make_user):
    return make_user(UserRole.STAFF, email="pending@campus.test", approved=False)


@pytest.fixture
def admin(make_user):
    return make_user(UserRole.ADMIN, email="admin@campus.test")


@pytest.fixture
def client_for():
    """Return an ``APIClient`` carrying a bearer token for ``user``."""

    def _client(user):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {generate_token_for_user(user)}")
        return client

    return _client


@pytest.fixture
def student_client(client_for, student):
    return client_for(student)


@pytest.fixture
def other_student_client(client_for, other_student):
    return client_for(other_student)


@pytest.fixture
def staff_client(client_for, staff):
    return client_for(staff)


@pytest.fixture
def admin_client(client_for, admin):
    return client_for(admin)


@pytest.fixture
def category(db):
    return Category.objects.create(name="Rice Meals", description="Served with rice")


@pytest.fixture
def item_a(category):
    return MenuItem.objects.create(category=category, name="Chicken Adobo", price=Decimal("50.00"), stock_limit=5)


@pytest.fixture
def item_b(category):
    return MenuItem.objects.create(category=category, name="Iced Tea", price=Decimal("20.00"), stock_limit=None)


@pytest.fixture
def place_order(student, item_a, item_b):
    """Place the standard two-line order (2x item_a, 1x item_b) for ``user``."""

    def _place(user=None, **overrides):
        cart = {
            "items": [
                {"menu_item_id": item_a.id, "quantity": 2},
                {"menu_item_id": item_b.id, "quantity": 1},
            ],
            "pickup_type": "take_out",
        }
        cart.update(overrides)
        return order_services.place_order(user_id=(user or student).id, **cart)

    return _place
