import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status, viewsets
from rest_framework.response import Response

from shared.api_markers import EmptySerializer
from shared.exceptions import BadRequestAlertException
from shared.header_util import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
)
from shared.metrics import TimedViewMixin

from . import repository
from .models import Wishlist
from .serializers import WishlistSerializer

logger = logging.getLogger(__name__)

ENTITY_NAME = "wishlist"


class WishlistViewSet(TimedViewMixin, viewsets.ViewSet):
    """
    /api/wishlists 리소스
    - 라우팅은 urls.py 의 (method → action) 매핑 테이블에서 명시적으로 등록
    - 영속화는 repository 모듈에 위임
    - 액션별 처리 시간은 TimedViewMixin 이 Prometheus 로 기록
    """

    permission_classes = [permissions.IsAuthenticated]
    serializer_class = WishlistSerializer

    # ---- helpers ---------------------------------------------------------

    def _read_payload(self, request):
        s = WishlistSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return dict(s.validated_data)

    def _build(self, request, payload) -> Wishlist:
        # user 는 INSERT 시에만 반영 (수정 시 기존 소유자 유지)
        wishlist_id = payload.pop("id", None)
        return Wishlist(id=wishlist_id, user=request.user, **payload)

    def _create(self, request, payload):
        if payload.get("id") is not None:
            raise BadRequestAlertException(
                "A new wishlist cannot already have an ID", ENTITY_NAME, "idexists"
            )
        result = repository.save(self._build(request, payload))
        headers = create_entity_creation_alert(ENTITY_NAME, result.id)
        headers["Location"] = f"/api/wishlists/{result.id}"
        return Response(
            WishlistSerializer(result).data,
            status=status.HTTP_201_CREATED,
            headers=headers,
        )

    # ---- actions ---------------------------------------------------------

    @extend_schema(
        request=WishlistSerializer,
        responses={
            201: WishlistSerializer,
            400: OpenApiResponse(description="id 가 이미 있는 경우 (X-<app>-error: error.idexists)"),
        },
    )
    def create(self, request):
        logger.debug("REST request to save Wishlist : %s", request.data)
        return self._create(request, self._read_payload(request))

    @extend_schema(
        request=WishlistSerializer,
        responses={200: WishlistSerializer, 201: WishlistSerializer},
    )
    def update(self, request):
        logger.debug("REST request to update Wishlist : %s", request.data)
        payload = self._read_payload(request)
        if payload.get("id") is None:
            # id 없는 PUT 은 생성으로 처리 (201 응답 가능)
            return self._create(request, payload)
        result = repository.save(self._build(request, payload))
        return Response(
            WishlistSerializer(result).data,
            status=status.HTTP_200_OK,
            headers=create_entity_update_alert(ENTITY_NAME, result.id),
        )

    @extend_schema(responses={200: WishlistSerializer(many=True)})
    def list(self, request):
        logger.debug("REST request to get all Wishlists")
        wishlists = repository.find_by_user(request.user)
        return Response(WishlistSerializer(wishlists, many=True).data)

    @extend_schema(
        responses={200: WishlistSerializer, 404: OpenApiResponse(description="없음")},
    )
    def retrieve(self, request, pk=None):
        logger.debug("REST request to get Wishlist : %s", pk)
        wishlist = repository.find_one(int(pk))
        if wishlist is None:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(WishlistSerializer(wishlist).data)

    @extend_schema(responses={200: EmptySerializer})
    def destroy(self, request, pk=None):
        logger.debug("REST request to delete Wishlist : %s", pk)
        repository.delete(int(pk))
        return Response(
            status=status.HTTP_200_OK,
            headers=create_entity_deletion_alert(ENTITY_NAME, pk),
        )
