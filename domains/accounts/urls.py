from django.urls import path

from rest_framework_simplejwt.views import TokenRefreshView

from .jwt import LoginTokenObtainPairView
from .views import AccountView

urlpatterns = [
    # 로그인 (JWT 발급)
    path("authenticate", LoginTokenObtainPairView.as_view(), name="authenticate"),
    # 토큰 갱신
    path("authenticate/refresh", TokenRefreshView.as_view(), name="authenticate-refresh"),
    # 내 정보
    path("account", AccountView.as_view(), name="account"),
]
