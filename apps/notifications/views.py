from drf_spectacular.utils import extend_schema
from rest_framework import generics
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.constants import ALL_ROLES
from apps.common.mixins import OwnerOnlyMixin, PermissionMixin
from apps.notifications import services
from apps.notifications.models import Notification
from apps.notifications.serializers import MarkAllResultSerializer, NotificationSerializer, UnreadCountSerializer


class _OwnFeedMixin:
    required_roles = ALL_ROLES

    def get_queryset(self):
        return Notification.objects.filter(user_id=self.request.user.id)


@extend_schema(summary="My notifications, newest first")
class NotificationListView(_OwnFeedMixin, PermissionMixin, generics.ListAPIView):
    serializer_class = NotificationSerializer


@extend_schema(summary="Mark one notification as read", request=None, responses={200: NotificationSerializer})
class NotificationReadView(OwnerOnlyMixin, generics.GenericAPIView):
    required_roles = ALL_ROLES
    serializer_class = NotificationSerializer
    queryset = Notification.objects.all()

    def patch(self, request, pk):
        notification = services.mark_read(self.get_object())
        return Response(self.get_serializer(notification).data)


@extend_schema(summary="Mark all my notifications as read", request=None, responses={200: MarkAllResultSerializer})
class NotificationMarkAllView(PermissionMixin, APIView):
    required_roles = ALL_ROLES

    def patch(self, request):
        updated = services.mark_all_read(request.user.id)
        return Response(MarkAllResultSerializer({"updated": updated}).data)


@extend_schema(summary="Number of unread notifications", responses={200: UnreadCountSerializer})
class UnreadCountView(PermissionMixin, APIView):
    required_roles = ALL_ROLES

    def get(self, request):
        return Response(UnreadCountSerializer({"unread": services.unread_count(request.user.id)}).data)
