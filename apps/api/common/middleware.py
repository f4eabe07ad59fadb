# 뷰 밖으로 새어 나온 예외(=DRF가 처리하지 못한 것) → 500 JSON.
# 500 응답에도 허용된 Origin 헤더를 직접 붙인다 (브라우저가 본문을 읽을 수 있도록).
from __future__ import annotations

import logging

from django.conf import settings
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def _allowed_origin(origin: str) -> bool:
    if not origin:
        return False
    if getattr(settings, "CORS_ALLOW_ALL_ORIGINS", False):
        return True
    return origin in (getattr(settings, "CORS_ALLOWED_ORIGINS", None) or [])


class UnhandledExceptionMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        logger.exception("unhandled error: %s %s", request.method, request.path)

        payload = {"detail": "Server error"}
        if settings.DEBUG:
            payload["error"] = f"{type(exception).__name__}: {exception}"
        response = JsonResponse(payload, status=500)

        origin = (request.META.get("HTTP_ORIGIN") or "").strip()
        if _allowed_origin(origin):
            response["Access-Control-Allow-Origin"] = origin
            if getattr(settings, "CORS_ALLOW_CREDENTIALS", False):
                response["Access-Control-Allow-Credentials"] = "true"
        return response
