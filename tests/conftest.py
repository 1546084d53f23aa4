# tests/conftest.py
from uuid import uuid4

from django.conf import settings
from django.contrib.auth import get_user_model

import pytest
from rest_framework.test import APIClient

from domains.wishlists.models import ProductId, Wishlist

User = get_user_model()


# ─────────────────────────────────────────────────────────────
# 전역 테스트 환경 최적화(해싱)
# ─────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True, scope="session")
def _fast_password_hasher(django_db_setup, django_db_blocker):
    """
    해시 느린 기본 해셔 대신 MD5 해셔 사용
    """
    with django_db_blocker.unblock():
        settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


# ─────────────────────────────────────────────────────────────
# 클라이언트 & 인증
# ─────────────────────────────────────────────────────────────
@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    """
    기본 로그인 사용자
    """
    password = "Test1234!A"
    u = User.objects.create_user(
        username=f"user_{uuid4().hex[:6]}",
        email="user@example.com",
        password=password,
    )
    # ✅ 로그인 테스트용 원문 비밀번호 보관
    u.raw_password = password
    return u


@pytest.fixture
def other_user(db):
    return User.objects.create_user(
        username=f"other_{uuid4().hex[:6]}",
        email="other@example.com",
        password="Test1234!A",
    )


@pytest.fixture
def auth_client(user):
    """
    /api/authenticate 로 토큰을 받아 Authorization 헤더 세팅된 APIClient 반환
    """
    c = APIClient()
    resp = c.post(
        "/api/authenticate",
        {"login": user.email, "password": user.raw_password},
        format="json",
    )
    assert resp.status_code == 200, getattr(resp, "data", resp.content)
    c.credentials(HTTP_AUTHORIZATION=f"Bearer {resp.data['access']}")
    return c


@pytest.fixture
def user_client(user):
    """JWT 없이 force_authenticate 로 로그인한 클라이언트"""
    c = APIClient()
    c.force_authenticate(user=user)
    return c


# ─────────────────────────────────────────────────────────────
# 팩토리 픽스처 (동적으로 여러 개 만들 때)
# ─────────────────────────────────────────────────────────────
@pytest.fixture
def user_factory(db):
    def _make(**kw):
        email = kw.pop("email", f"user{uuid4().hex[:6]}@example.com")
        password = kw.pop("password", "Test1234!A")
        if "username" not in kw:
            base = email.split("@")[0] or "user"
            kw["username"] = f"{base}_{uuid4().hex[:6]}"

        u = User.objects.create_user(email=email, password=password, **kw)
        # ✅ 로그인 테스트용 원문 비밀번호 보관
        u.raw_password = password
        return u

    return _make


@pytest.fixture
def wishlist_factory(db):
    def _make(**kw):
        kw.setdefault("name", f"wishlist-{uuid4().hex[:6]}")
        return Wishlist.objects.create(**kw)

    return _make


@pytest.fixture
def product_id_factory(db):
    def _make(**kw):
        kw.setdefault("product_id_two", "1.00")
        return ProductId.objects.create(**kw)

    return _make
