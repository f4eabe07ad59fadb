# domains/classroom/admin.py

from django.contrib import admin
from .models import Classroom, ModuleFolder, Module, Assignment


@admin.register(Classroom)
class ClassroomAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "created_by", "created_at")
    list_display_links = ("id", "title")
    search_fields = ("title",)
    ordering = ("-id",)


@admin.register(ModuleFolder)
class ModuleFolderAdmin(admin.ModelAdmin):
    list_display = ("id", "classroom", "title", "order_index")
    list_filter = ("classroom",)
    ordering = ("classroom", "order_index")


@admin.register(Module)
class ModuleAdmin(admin.ModelAdmin):
    list_display = ("id", "classroom", "folder", "title", "order_index")
    list_display_links = ("id", "title")
    list_filter = ("classroom",)
    search_fields = ("title",)


@admin.register(Assignment)
class AssignmentAdmin(admin.ModelAdmin):
    list_display = ("id", "classroom", "title", "deadline")
    list_display_links = ("id", "title")
    list_filter = ("classroom",)
    search_fields = ("title",)
