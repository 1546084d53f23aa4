# shared/header_util.py
"""
클라이언트 알림(toast)용 응답 헤더 생성 유틸

헤더 이름은 settings.ALERT_APPLICATION_NAME 으로부터 만들어진다.
    X-<app>-alert  : 성공 메시지
    X-<app>-error  : 실패 키 (error.<error_key>)
    X-<app>-params : 엔티티 식별자 또는 엔티티 이름

사용 예시:
    return Response(data, headers=create_entity_update_alert("wishlist", obj.id))
"""
from __future__ import annotations

import logging
from typing import Any, Dict

from django.conf import settings

logger = logging.getLogger(__name__)


def _prefix() -> str:
    return f"X-{getattr(settings, 'ALERT_APPLICATION_NAME', 'firstcodeApp')}"


def create_alert(message: str, param: Any) -> Dict[str, str]:
    prefix = _prefix()
    return {
        f"{prefix}-alert": message,
        f"{prefix}-params": str(param),
    }


def create_entity_creation_alert(entity_name: str, param: Any) -> Dict[str, str]:
    return create_alert(
        f"A new {entity_name} is created with identifier {param}", param
    )


def create_entity_update_alert(entity_name: str, param: Any) -> Dict[str, str]:
    return create_alert(f"A {entity_name} is updated with identifier {param}", param)


def create_entity_deletion_alert(entity_name: str, param: Any) -> Dict[str, str]:
    return create_alert(f"A {entity_name} is deleted with identifier {param}", param)


def create_failure_alert(
    entity_name: str, error_key: str, default_message: str
) -> Dict[str, str]:
    """메시지는 헤더에 싣지 않고 로그로만 남긴다."""
    logger.warning("Entity creation failed, %s", default_message)
    prefix = _prefix()
    return {
        f"{prefix}-error": f"error.{error_key}",
        f"{prefix}-params": entity_name,
    }


__all__ = [
    "create_alert",
    "create_entity_creation_alert",
    "create_entity_update_alert",
    "create_entity_deletion_alert",
    "create_failure_alert",
]
