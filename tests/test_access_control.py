import uuid
from datetime import timedelta

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.tokens import AccessToken

from apps.authentication.authentication import BearerIdentityAuthentication, Identity
from apps.authentication.utils import get_custom_token
from apps.common.constants import UserRole

pytestmark = pytest.mark.django_db

NEW_ITEM = {"name": "Pancit", "price": "45.00"}


def test_token_carries_subject_and_role(student):
    token = get_custom_token(student)

    assert token["sub"] == str(student.id)
    assert token["role"] == "student"


def test_identity_is_built_from_claims_alone(staff):
    identity = BearerIdentityAuthentication().get_user(get_custom_token(staff))

    assert identity == Identity(id=staff.id, role=UserRole.STAFF)
    assert identity.is_authenticated


def test_token_without_role_claim_is_invalid(student):
    token = AccessToken.for_user(student)

    with pytest.raises(InvalidToken):
        BearerIdentityAuthentication().get_user(token)


def test_public_read_needs_no_token(api_client):
    assert api_client.get("/menu").status_code == 200


def test_missing_token_is_401(api_client):
    assert api_client.post("/menu", NEW_ITEM, format="json").status_code == 401


def test_garbage_token_is_401():
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION="Bearer not-a-real-token")
    assert client.get("/orders").status_code == 401


def test_token_for_unknown_role_is_401(student):
    token = AccessToken.for_user(student)
    token["role"] = "janitor"
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

    assert client.get("/orders").status_code == 401


def test_wrong_role_is_403(student_client):
    assert student_client.post("/menu", NEW_ITEM, format="json").status_code == 403


@pytest.mark.parametrize("client_fixture", ["staff_client", "admin_client"])
def test_staff_roles_may_write_menu(request, client_fixture):
    client = request.getfixturevalue(client_fixture)
    assert client.post("/menu", NEW_ITEM, format="json").status_code == 201


def test_admin_only_routes_reject_staff(staff_client):
    assert staff_client.get("/auth/staff-stats").status_code == 403
    assert staff_client.delete(f"/payments/{uuid.uuid4()}").status_code == 403


@pytest.fixture
def expired_client(student):
    token = get_custom_token(student)
    token.set_exp(lifetime=-timedelta(minutes=1))
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


@pytest.mark.parametrize("path", ["/menu", "/menu/categories"])
def test_public_read_ignores_expired_token(expired_client, item_a, path):
    assert expired_client.get(path).status_code == 200


def test_public_item_detail_ignores_expired_token(expired_client, item_a):
    assert expired_client.get(f"/menu/{item_a.id}").status_code == 200


def test_expired_token_still_blocks_protected_methods(expired_client):
    assert expired_client.post("/menu", NEW_ITEM, format="json").status_code == 401
    assert expired_client.get("/orders").status_code == 401
