# apps/api/v1/urls.py
from django.urls import path, include

from apps.api.common.views import health_check

urlpatterns = [
    path("health/", health_check, name="health-check"),

    # =========================
    # Domain APIs
    # =========================
    path("core/", include("apps.core.urls")),
    path("classroom/", include("apps.domains.classroom.urls")),
    path("", include("apps.domains.news.api.urls")),
    path("social/", include("apps.domains.social.api.urls")),
]
