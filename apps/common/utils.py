"""
Role helpers shared by the permission classes and view mixins.

They work on anything with ``is_authenticated`` and ``role``, which covers both the
token ``Identity`` and a loaded ``User``.
"""

from apps.common.constants import STAFF_ROLES, UserRole

# Marker for views (or single methods) that do not require a token
PUBLIC = None


def is_authenticated(user) -> bool:
    return getattr(user, "is_authenticated", False)


def get_role(user) -> UserRole | None:
    role = getattr(user, "role", None)
    return UserRole(role) if role else None


def has_role(user, roles) -> bool:
    return is_authenticated(user) and get_role(user) in roles


def is_admin_or_staff(user) -> bool:
    return has_role(user, STAFF_ROLES)


def get_required_roles(view, method: str):
    """
    Resolve the role allow-list a view declares for an HTTP method.

    ``required_roles`` is either one iterable for every method or a mapping of
    method name to iterable; a missing method, or ``PUBLIC``, means no token is needed.
    """
    required = getattr(view, "required_roles", PUBLIC)
    if isinstance(required, dict):
        method = method.upper()
        return required.get("GET" if method == "HEAD" else method, PUBLIC)
    return required
