# PATH: apps/domains/classroom/views.py

from rest_framework.viewsets import ModelViewSet
from rest_framework.filters import SearchFilter
from django_filters.rest_framework import DjangoFilterBackend

from apps.core.permissions import IsAslabOrReadOnly
from libs.s3_client import upload_file
from .filters import ModuleFolderFilter, ModuleFilter, AssignmentFilter
from .models import Classroom, ModuleFolder, Module, Assignment
from .serializers import (
    ClassroomSerializer,
    ModuleFolderSerializer,
    ModuleSerializer,
    AssignmentSerializer,
)


class ClassroomViewSet(ModelViewSet):
    serializer_class = ClassroomSerializer
    permission_classes = [IsAslabOrReadOnly]

    filter_backends = [SearchFilter]
    search_fields = ["title", "description"]

    def get_queryset(self):
        return Classroom.objects.select_related("created_by").order_by("-created_at", "-id")

    def _save_with_image(self, serializer, **extra):
        image = serializer.validated_data.pop("image", None)
        if image is not None:
            extra["image_url"] = upload_file(image, "classes")
        serializer.save(**extra)

    def perform_create(self, serializer):
        self._save_with_image(serializer, created_by=self.request.user)

    def perform_update(self, serializer):
        self._save_with_image(serializer)


class ModuleFolderViewSet(ModelViewSet):
    serializer_class = ModuleFolderSerializer
    permission_classes = [IsAslabOrReadOnly]

    filter_backends = [DjangoFilterBackend]
    filterset_class = ModuleFolderFilter

    def get_queryset(self):
        return ModuleFolder.objects.all().order_by("order_index", "id")

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)


class ModuleViewSet(ModelViewSet):
    serializer_class = ModuleSerializer
    permission_classes = [IsAslabOrReadOnly]

    filter_backends = [DjangoFilterBackend, SearchFilter]
    filterset_class = ModuleFilter
    search_fields = ["title"]

    def get_queryset(self):
        return Module.objects.all().order_by("order_index", "id")

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)


class AssignmentViewSet(ModelViewSet):
    serializer_class = AssignmentSerializer
    permission_classes = [IsAslabOrReadOnly]

    filter_backends = [DjangoFilterBackend, SearchFilter]
    filterset_class = AssignmentFilter
    search_fields = ["title"]

    def get_queryset(self):
        return Assignment.objects.all().order_by("deadline", "id")

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)
