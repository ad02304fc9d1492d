from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import generics, status
from rest_framework.response import Response

from apps.common.constants import ALL_ROLES, STAFF_ROLES, UserRole
from apps.common.drf_permissions import IsOwnerOrStaff, RoleBasedPermission
from apps.common.mixins import OwnerOnlyMixin, OwnershipMixin, PermissionMixin
from apps.orders import services
from apps.orders.models import Order
from apps.orders.serializers import (
    OrderCreateSerializer,
    OrderSerializer,
    OrderStatusSerializer,
    WalkInOrderCreateSerializer,
)

STUDENT_ONLY = (UserRole.STUDENT,)


@extend_schema_view(
    get=extend_schema(summary="Staff: all orders. | Student: my orders."),
    post=extend_schema(summary="Student: place an order.", request=OrderCreateSerializer, responses={201: OrderSerializer}),
)
class OrderListCreateView(OwnershipMixin, generics.ListCreateAPIView):
    required_roles = {"GET": ALL_ROLES, "POST": STUDENT_ONLY}
    serializer_class = OrderSerializer
    queryset = Order.objects.prefetch_related("items__menu_item")
    filterset_fields = ["status", "payment_status", "customer_type"]

    def create(self, request, *args, **kwargs):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = services.place_order(user_id=request.user.id, **serializer.validated_data)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)


@extend_schema(
    summary="Staff: record a walk-in order at the counter",
    request=WalkInOrderCreateSerializer,
    responses={201: OrderSerializer},
)
class WalkInOrderView(PermissionMixin, generics.GenericAPIView):
    required_roles = STAFF_ROLES
    serializer_class = WalkInOrderCreateSerializer

    def post(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = services.place_walk_in_order(staff_id=request.user.id, **serializer.validated_data)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)


@extend_schema_view(
    get=extend_schema(summary="Owner or staff: order details"),
    delete=extend_schema(summary="Staff: delete an order (stock is not restored)"),
)
class OrderDetailView(PermissionMixin, generics.RetrieveDestroyAPIView):
    permission_classes = [RoleBasedPermission, IsOwnerOrStaff]
    required_roles = {"GET": ALL_ROLES, "DELETE": STAFF_ROLES}
    serializer_class = OrderSerializer
    queryset = Order.objects.prefetch_related("items__menu_item")

    def perform_destroy(self, instance):
        services.delete_order(instance)


@extend_schema(summary="Staff: set order status", request=OrderStatusSerializer, responses={200: OrderSerializer})
class OrderStatusView(PermissionMixin, generics.GenericAPIView):
    required_roles = STAFF_ROLES
    serializer_class = OrderStatusSerializer
    queryset = Order.objects.prefetch_related("items__menu_item")

    def put(self, request, pk):
        order = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = services.update_status(order, serializer.validated_data["status"])
        return Response(OrderSerializer(order).data)


class _OwnOrderActionView(OwnerOnlyMixin, generics.GenericAPIView):
    required_roles = STUDENT_ONLY
    serializer_class = OrderSerializer
    transition = None
    queryset = Order.objects.prefetch_related("items__menu_item")

    def patch(self, request, pk):
        order = self.transition(self.get_object())
        return Response(self.get_serializer(order).data)


@extend_schema(summary="Student: cancel my pending order", request=None, responses={200: OrderSerializer})
class OrderCancelView(_OwnOrderActionView):
    transition = staticmethod(services.cancel_order)


@extend_schema(summary="Student: confirm I am ready to pay for my order", request=None, responses={200: OrderSerializer})
class OrderConfirmPaymentView(_OwnOrderActionView):
    transition = staticmethod(services.confirm_payment)
