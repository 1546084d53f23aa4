# shared/exceptions.py
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.header_util import create_failure_alert


class BadRequestAlertException(APIException):
    """
    클라이언트 오류(400) + 실패 알림 헤더
    - entity_name / error_key 는 X-<app>-params / X-<app>-error 헤더로 나간다
    - 응답 본문은 비어 있음
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "bad_request"

    def __init__(self, default_message: str, entity_name: str, error_key: str):
        super().__init__(detail=default_message, code=error_key)
        self.default_message = default_message
        self.entity_name = entity_name
        self.error_key = error_key


def alert_exception_handler(exc, context):
    """BadRequestAlertException 만 직접 처리하고 나머지는 DRF 기본 핸들러로 넘긴다."""
    if isinstance(exc, BadRequestAlertException):
        return Response(
            status=exc.status_code,
            headers=create_failure_alert(
                exc.entity_name, exc.error_key, exc.default_message
            ),
        )
    return exception_handler(exc, context)
