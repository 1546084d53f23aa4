# shared/metrics.py
"""
Prometheus 지표

- http_request_duration_seconds : 뷰 액션별 처리 시간 (method, endpoint)
- http_requests_total           : 뷰 액션별 요청 수 (method, endpoint, status)

endpoint 라벨은 "<ViewClass>.<action>" 형식. 예) WishlistViewSet.create
"""
import time

from django.http import HttpResponse
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

request_count = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)
request_duration = Histogram(
    "http_request_duration_seconds", "HTTP request duration", ["method", "endpoint"]
)


def endpoint_label(view) -> str:
    action = getattr(view, "action", None) or view.request.method.lower()
    return f"{view.__class__.__name__}.{action}"


class TimedViewMixin:
    """DRF 뷰에 섞어 쓰면 액션마다 처리 시간/요청 수를 기록한다."""

    def initial(self, request, *args, **kwargs):
        self._metrics_started = time.perf_counter()
        super().initial(request, *args, **kwargs)

    def finalize_response(self, request, response, *args, **kwargs):
        response = super().finalize_response(request, response, *args, **kwargs)
        started = getattr(self, "_metrics_started", None)
        endpoint = endpoint_label(self)
        if started is not None:
            request_duration.labels(request.method, endpoint).observe(
                time.perf_counter() - started
            )
        request_count.labels(request.method, endpoint, str(response.status_code)).inc()
        return response


def metrics_view(_request):
    return HttpResponse(generate_latest(), content_type=CONTENT_TYPE_LATEST)
