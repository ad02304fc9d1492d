from drf_spectacular.utils import extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.common.constants import STAFF_ROLES
from apps.common.mixins import PermissionMixin
from apps.stats import services
from apps.stats.serializers import OverviewSerializer


@extend_schema(summary="Staff: dashboard counts", responses={200: OverviewSerializer})
class OverviewView(PermissionMixin, APIView):
    required_roles = STAFF_ROLES

    def get(self, request):
        return Response(OverviewSerializer(services.overview()).data)
