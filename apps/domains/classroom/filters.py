import django_filters

from .models import ModuleFolder, Module, Assignment


class ModuleFolderFilter(django_filters.FilterSet):
    class_id = django_filters.NumberFilter(field_name="classroom_id")

    class Meta:
        model = ModuleFolder
        fields = ["class_id"]


class ModuleFilter(django_filters.FilterSet):
    class_id = django_filters.NumberFilter(field_name="classroom_id")
    folder_id = django_filters.NumberFilter(field_name="folder_id")

    class Meta:
        model = Module
        fields = ["class_id", "folder_id"]


class AssignmentFilter(django_filters.FilterSet):
    class_id = django_filters.NumberFilter(field_name="classroom_id")

    class Meta:
        model = Assignment
        fields = ["class_id"]
