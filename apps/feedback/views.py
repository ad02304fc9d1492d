from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import generics

from apps.common.constants import ALL_ROLES
from apps.common.mixins import PermissionMixin
from apps.feedback.models import Feedback
from apps.feedback.serializers import FeedbackSerializer


@extend_schema_view(
    get=extend_schema(summary="My feedback"),
    post=extend_schema(summary="Leave a 1-5 rating with an optional comment"),
)
class FeedbackListCreateView(PermissionMixin, generics.ListCreateAPIView):
    required_roles = ALL_ROLES
    serializer_class = FeedbackSerializer

    def get_queryset(self):
        return Feedback.objects.filter(user_id=self.request.user.id)

    def perform_create(self, serializer):
        serializer.save(user_id=self.request.user.id)
