from django.conf import settings
from django.db import models

from apps.api.common.models import TimestampModel


# ========================================================
# Classroom (class)
# ========================================================

class Classroom(TimestampModel):
    title = models.CharField(max_length=100)
    description = models.TextField(blank=True, default="")
    image_url = models.URLField(max_length=255, blank=True, null=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_classes",
    )

    class Meta:
        db_table = "classes"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.title


# ========================================================
# ModuleFolder
# ========================================================

class ModuleFolder(TimestampModel):
    classroom = models.ForeignKey(
        Classroom,
        on_delete=models.CASCADE,
        related_name="folders",
        db_column="class_id",
    )
    title = models.CharField(max_length=100)
    order_index = models.IntegerField(default=0)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )

    class Meta:
        db_table = "module_folders"
        ordering = ["order_index", "id"]

    def __str__(self):
        return f"{self.classroom.title} - {self.title}"


# ========================================================
# Module
# ========================================================

class Module(TimestampModel):
    folder = models.ForeignKey(
        ModuleFolder,
        on_delete=models.CASCADE,
        related_name="modules",
        null=True,
        blank=True,
    )
    classroom = models.ForeignKey(
        Classroom,
        on_delete=models.CASCADE,
        related_name="modules",
        db_column="class_id",
    )
    title = models.CharField(max_length=100)
    content = models.TextField()
    order_index = models.IntegerField(default=0)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )

    class Meta:
        db_table = "modules"
        ordering = ["order_index", "id"]

    def __str__(self):
        return self.title


# ========================================================
# Assignment
# ========================================================

class Assignment(TimestampModel):
    classroom = models.ForeignKey(
        Classroom,
        on_delete=models.CASCADE,
        related_name="assignments",
        db_column="class_id",
    )
    title = models.CharField(max_length=100)
    description = models.TextField()
    deadline = models.DateTimeField()
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )

    class Meta:
        db_table = "assignments"
        ordering = ["deadline", "id"]

    def __str__(self):
        return self.title
