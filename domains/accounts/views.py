from drf_spectacular.utils import extend_schema
from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.metrics import TimedViewMixin

from .serializers import AccountSerializer


class AccountView(TimedViewMixin, APIView):
    """현재 인증된 사용자 (목록 조회 범위를 결정하는 actor)"""

    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(responses=AccountSerializer)
    def get(self, request):
        return Response(AccountSerializer(request.user).data)
