# shared/api_markers.py
"""
API 문서화용 마커 클래스

@extend_schema 에서 본문 없는 응답을 표현할 때 사용한다.
"""
from rest_framework import serializers


class EmptySerializer(serializers.Serializer):
    """
    본문이 없는 요청/응답에 쓰는 더미 시리얼라이저

    사용 예시:
    @extend_schema(responses={200: EmptySerializer})
    def destroy(self, request, pk=None):
        ...
    """
    pass
