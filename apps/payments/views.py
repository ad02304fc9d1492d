from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import generics

from apps.common.constants import STAFF_ROLES, UserRole
from apps.common.mixins import PermissionMixin
from apps.payments.models import Payment
from apps.payments.serializers import PaymentCreateSerializer, PaymentSerializer


@extend_schema_view(
    get=extend_schema(summary="Staff: list counter payments"),
    post=extend_schema(
        summary="Staff: record a counter payment",
        description="With `order_id` the order total is due and the order becomes paid and picked up.",
        request=PaymentCreateSerializer,
        responses={201: PaymentCreateSerializer},
    ),
)
class PaymentListCreateView(PermissionMixin, generics.ListCreateAPIView):
    required_roles = STAFF_ROLES
    queryset = Payment.objects.all()
    filterset_fields = ["payment_method", "order"]

    def get_serializer_class(self):
        if self.request.method == "POST":
            return PaymentCreateSerializer
        return PaymentSerializer


@extend_schema_view(
    get=extend_schema(summary="Staff: payment details"),
    delete=extend_schema(summary="Admin: delete a payment (the order stays paid)"),
)
class PaymentDetailView(PermissionMixin, generics.RetrieveDestroyAPIView):
    required_roles = {"GET": STAFF_ROLES, "DELETE": (UserRole.ADMIN,)}
    serializer_class = PaymentSerializer
    queryset = Payment.objects.all()
