import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)

SERVICE_NAME = "praktikum-api"


def _database_ok() -> bool:
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        logger.warning("health check: database unavailable: %s", e)
        return False
    return True


def health_check(request):
    """GET /api/v1/health/: 인증 없음. DB 연결 실패 시 503."""
    ok = _database_ok()
    return JsonResponse(
        {
            "status": "healthy" if ok else "unhealthy",
            "service": SERVICE_NAME,
            "database": "connected" if ok else "disconnected",
        },
        status=200 if ok else 503,
    )
