# apps/core/urls.py

from django.urls import path

from apps.core.views import MeView, RegisterView

urlpatterns = [
    path("register/", RegisterView.as_view(), name="core-register"),
    path("me/", MeView.as_view(), name="core-me"),
]
