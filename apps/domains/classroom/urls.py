from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import (
    ClassroomViewSet,
    ModuleFolderViewSet,
    ModuleViewSet,
    AssignmentViewSet,
)

router = DefaultRouter()
router.register(r"classes", ClassroomViewSet, basename="classes")
router.register(r"folders", ModuleFolderViewSet, basename="folders")
router.register(r"modules", ModuleViewSet, basename="modules")
router.register(r"assignments", AssignmentViewSet, basename="assignments")

urlpatterns = [
    path("", include(router.urls)),
]
