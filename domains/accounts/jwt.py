# domains/accounts/jwt.py
from django.contrib.auth import get_user_model
from django.db.models import Q

from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.views import TokenObtainPairView

User = get_user_model()

BAD_CREDENTIALS = "Bad credentials"


def find_login_user(login: str, password: str):
    """
    login 은 username(대소문자 구분) 또는 email(대소문자 무시).
    기본 User 모델은 email 이 유일하지 않으므로 같은 email 의 활성 계정 중
    비밀번호가 맞는 첫 계정을 고른다.
    """
    login = (login or "").strip()
    if not login or not password:
        return None
    candidates = User.objects.filter(
        Q(**{User.USERNAME_FIELD: login}) | Q(email__iexact=login),
        is_active=True,
    ).order_by("pk")
    for user in candidates:
        if user.check_password(password):
            return user
    return None


class LoginTokenObtainPairSerializer(TokenObtainPairSerializer):
    # 요청 본문: {"login": "...", "password": "..."}
    username_field = "login"

    def validate(self, attrs):
        user = find_login_user(attrs.get("login"), attrs.get("password"))
        if user is None:
            raise AuthenticationFailed(detail=BAD_CREDENTIALS, code="bad_credentials")

        refresh = self.get_token(user)
        return {
            "refresh": str(refresh),
            "access": str(refresh.access_token),
        }


class LoginTokenObtainPairView(TokenObtainPairView):
    serializer_class = LoginTokenObtainPairSerializer
