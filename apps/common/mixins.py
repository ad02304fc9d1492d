from .drf_permissions import IsOwner, IsOwnerOrStaff, RoleBasedPermission
from .utils import PUBLIC, get_required_roles, is_admin_or_staff, is_authenticated


class PermissionMixin:
    """Gate a view by the roles declared in ``required_roles``."""

    permission_classes = [RoleBasedPermission]
    required_roles = ()

    def perform_authentication(self, request):
        # Public methods never read the Authorization header
        if get_required_roles(self, request.method) is PUBLIC:
            return
        super().perform_authentication(request)


class OwnershipMixin:
    """Role gate plus object ownership; students only see rows they own."""

    permission_classes = [RoleBasedPermission, IsOwnerOrStaff]

    def get_queryset(self):
        queryset = super().get_queryset()
        user = getattr(self.request, "user", None)

        if not user or not is_authenticated(user):
            return queryset.none()

        if is_admin_or_staff(user):
            return queryset

        return queryset.filter(user_id=user.id)


class OwnerOnlyMixin:
    permission_classes = [RoleBasedPermission, IsOwner]


# Examples of how to use the mixins:
# class MenuItemListView(PermissionMixin, ListCreateAPIView):
#     required_roles = {"GET": PUBLIC, "POST": STAFF_ROLES}

# class OrderDetailView(PermissionMixin, RetrieveAPIView):
#     permission_classes = [RoleBasedPermission, IsOwnerOrStaff]
#     required_roles = ALL_ROLES
