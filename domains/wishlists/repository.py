from __future__ import annotations

from typing import Any, List, Optional

from django.db import transaction

from .models import Wishlist

# 소유자는 생성 시점에만 기록하고 수정으로는 바뀌지 않음
_OWNER_FIELD = "user"


@transaction.atomic
def save(wishlist: Wishlist) -> Wishlist:
    """
    upsert 저장 (merge).
    - id 없음: INSERT, id 는 DB 가 발급
    - id 있음 + 행 있음: UPDATE (user 컬럼 제외), 저장된 행을 다시 읽어 반환
    - id 있음 + 행 없음: 보낸 id 는 버리고 새 id 로 INSERT
    """
    if wishlist.pk is not None:
        values = {
            f.attname: getattr(wishlist, f.attname)
            for f in Wishlist._meta.concrete_fields
            if not f.primary_key and f.name != _OWNER_FIELD
        }
        if Wishlist.objects.filter(pk=wishlist.pk).update(**values):
            return Wishlist.objects.select_related("user").get(pk=wishlist.pk)
        wishlist.pk = None
    wishlist.save(force_insert=True)
    return wishlist


def find_one(wishlist_id: int) -> Optional[Wishlist]:
    return Wishlist.objects.filter(pk=wishlist_id).select_related("user").first()


def delete(wishlist_id: int) -> None:
    # 존재 여부 확인 없이 삭제 요청 (없는 id 도 조용히 통과)
    Wishlist.objects.filter(pk=wishlist_id).delete()


def find_by_user(user: Any) -> List[Wishlist]:
    """현재 사용자 소유 위시리스트만 id 순으로."""
    if not getattr(user, "is_authenticated", False):
        return []
    return list(Wishlist.objects.filter(user=user).select_related("user").order_by("id"))


__all__ = ["save", "find_one", "delete", "find_by_user"]
