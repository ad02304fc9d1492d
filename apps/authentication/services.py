import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone
from rest_framework import exceptions

from apps.authentication.utils import (
    generate_password_reset_token,
    generate_token_for_user,
    generate_verification_code,
)
from apps.common.constants import STAFF_ROLES, UserRole
from apps.common.exceptions import Conflict, InvalidCredentials
from apps.common.mailer import send_email

if TYPE_CHECKING:
    from apps.users.models import User as UserType
else:
    UserType = object

User = get_user_model()

logger = logging.getLogger(__name__)


def send_verification_email(user: "UserType"):
    """Email the current 4-digit verification code."""
    send_email(
        user.email,
        "Verify your email",
        f"Your cafeteria verification code is {user.verification_code}.",
    )


def send_password_reset_email(user: "UserType"):
    """Email a link to the frontend password reset page."""
    reset_link = f"{settings.FRONTEND_URL}/reset-password/{user.reset_token}"
    send_email(
        user.email,
        "Reset your password",
        f"Please click the following link to reset your password: {reset_link}\n"
        f"The link expires in {settings.PASSWORD_RESET_TIMEOUT_MINUTES} minutes.",
    )


def send_staff_approved_email(user: "UserType"):
    send_email(
        user.email,
        "Your staff account has been approved",
        f"Hi {user.full_name}, an administrator approved your staff account. You can now log in.",
    )


def _ensure_email_available(email: str, exclude_pk=None):
    qs = User.objects.filter(email__iexact=email)
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    if qs.exists():
        raise Conflict("Email already registered.")


@transaction.atomic
def register_user(*, email: str, password: str, role: UserRole = UserRole.STUDENT, **profile) -> "UserType":
    """
    Create an account with a fresh verification code.

    Staff accounts are created unapproved and cannot log in until an admin approves them.
    """
    _ensure_email_available(email)

    create = User.objects.create_staff if role == UserRole.STAFF else User.objects.create_user
    user = create(
        email=email,
        password=password,
        role=role,
        verification_code=generate_verification_code(),
        **profile,
    )
    logger.info("Registered %s account %s", role, user.id)

    send_verification_email(user)
    return user


def issue_login(user: "UserType") -> dict:
    return {"token": generate_token_for_user(user), "user": user}


def authenticate_credentials(email: str, password: str, *, staff_only: bool = False) -> "UserType":
    """
    Check email + password and the approval gate.

    ``staff_only`` restricts the login to staff and admin accounts.
    """
    try:
        user = User.objects.get(email__iexact=email)
    except User.DoesNotExist as err:
        raise InvalidCredentials() from err

    if not user.check_password(password):
        raise InvalidCredentials()

    if staff_only and user.role not in STAFF_ROLES:
        raise exceptions.PermissionDenied("This login is for staff accounts only.")

    if not user.can_log_in:
        raise exceptions.PermissionDenied("Your account is pending admin approval.")

    return user


def resend_verification_code(email: str):
    try:
        user = User.objects.get(email__iexact=email)
    except User.DoesNotExist:
        # Don't reveal user existence
        return

    user.verification_code = generate_verification_code()
    user.save(update_fields=["verification_code", "updated_at"])
    send_verification_email(user)


def verify_email_code(email: str, code: str) -> "UserType":
    try:
        user = User.objects.get(email__iexact=email)
    except User.DoesNotExist as err:
        raise exceptions.ValidationError({"code": "Invalid verification code."}) from err

    if user.email_verified:
        return user

    if not user.verification_code or user.verification_code != code:
        raise exceptions.ValidationError({"code": "Invalid verification code."})

    user.email_verified = True
    user.verification_code = None
    user.save(update_fields=["email_verified", "verification_code", "updated_at"])
    return user


def request_password_reset(email: str):
    try:
        user = User.objects.get(email__iexact=email)
    except User.DoesNotExist:
        # Don't reveal user existence
        return

    user.reset_token = generate_password_reset_token()
    user.reset_token_expires_at = timezone.now() + timedelta(minutes=settings.PASSWORD_RESET_TIMEOUT_MINUTES)
    user.save(update_fields=["reset_token", "reset_token_expires_at", "updated_at"])
    logger.info("Password reset requested for user %s", user.id)

    send_password_reset_email(user)


@transaction.atomic
def reset_password(token: str, new_password: str) -> "UserType":
    user = (
        User.objects.select_for_update()
        .filter(reset_token=token, reset_token_expires_at__gt=timezone.now())
        .first()
    )
    if user is None:
        raise exceptions.ValidationError({"token": "Invalid or expired token."})

    user.set_password(new_password)
    user.reset_token = None
    user.reset_token_expires_at = None
    user.save(update_fields=["password", "reset_token", "reset_token_expires_at", "updated_at"])
    logger.info("Password reset completed for user %s", user.id)
    return user


def update_profile(user: "UserType", **changes) -> "UserType":
    """
    Apply profile changes. A new email address has to be verified again.
    """
    email = changes.get("email")
    email_changed = email is not None and email.lower() != user.email.lower()
    if email_changed:
        _ensure_email_available(email, exclude_pk=user.pk)
        changes["email_verified"] = False
        changes["verification_code"] = generate_verification_code()

    for field, value in changes.items():
        setattr(user, field, value)
    user.save(update_fields=[*changes.keys(), "updated_at"])

    if email_changed:
        logger.info("User %s changed email, verification reset", user.id)
        send_verification_email(user)
    return user


def change_password(user: "UserType", current_password: str, new_password: str):
    if not user.check_password(current_password):
        raise exceptions.ValidationError({"current_password": "Current password is not correct."})

    user.set_password(new_password)
    user.save(update_fields=["password", "updated_at"])


def approve_staff(user: "UserType") -> "UserType":
    if user.role != UserRole.STAFF:
        raise exceptions.ValidationError({"detail": "Only staff accounts need approval."})

    if not user.approved:
        user.approved = True
        user.save(update_fields=["approved", "updated_at"])
        logger.info("Staff account %s approved", user.id)

    send_staff_approved_email(user)
    return user


def staff_stats() -> dict:
    staff = User.objects.filter(role=UserRole.STAFF)
    approved = staff.filter(approved=True).count()
    total = staff.count()
    return {"total": total, "approved": approved, "pending": total - approved}
