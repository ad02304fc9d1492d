from rest_framework import permissions

from .utils import PUBLIC, get_required_roles, has_role, is_admin_or_staff, is_authenticated


class RoleBasedPermission(permissions.BasePermission):
    message = "Forbidden: insufficient role."

    def has_permission(self, request, view) -> bool:
        required = get_required_roles(view, request.method)
        if required is PUBLIC:
            return True

        if not is_authenticated(request.user):
            return False

        return has_role(request.user, required)


class IsOwnerOrStaff(permissions.BasePermission):
    message = "You can only access your own object."

    def has_object_permission(self, request, view, obj):
        user = request.user

        if is_admin_or_staff(user):
            return True

        return getattr(obj, "user_id", None) == user.id


class IsOwner(permissions.BasePermission):
    message = "You can only change your own object."

    def has_object_permission(self, request, view, obj):
        return getattr(obj, "user_id", None) == request.user.id
