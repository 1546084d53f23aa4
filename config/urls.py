from django.contrib import admin
from django.urls import path, include, re_path
from django.views.generic import RedirectView
from django.http import JsonResponse
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from shared.metrics import metrics_view


def healthz(_):
    return JsonResponse({"ok": True})


urlpatterns = [
    # Admin
    path("admin/", admin.site.urls),

    # OpenAPI / Swagger
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="docs"),

    # 슬래시 없는 접근 → 슬래시 있는 경로로 301 정규화
    re_path(r"^api/schema$", RedirectView.as_view(url="/api/schema/", permanent=True)),
    re_path(r"^api/docs$", RedirectView.as_view(url="/api/docs/", permanent=True)),

    # API 엔드포인트
    path("api/", include("api.urls")),

    # 루트 → 문서
    path("", RedirectView.as_view(url="/api/docs/", permanent=False)),

    # 헬스체크
    path("healthz/", healthz),

    # Prometheus 지표
    path("metrics", metrics_view, name="metrics"),
]
