# domains/classroom/serializers.py

from rest_framework import serializers

from .models import Classroom, ModuleFolder, Module, Assignment


class ClassroomSerializer(serializers.ModelSerializer):
    creator_name = serializers.CharField(source="created_by.username", read_only=True, default=None)
    image = serializers.FileField(write_only=True, required=False)

    class Meta:
        model = Classroom
        fields = [
            "id",
            "title",
            "description",
            "image_url",
            "image",
            "created_by",
            "creator_name",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["image_url", "created_by", "created_at", "updated_at"]


class ModuleFolderSerializer(serializers.ModelSerializer):
    class_id = serializers.PrimaryKeyRelatedField(source="classroom", queryset=Classroom.objects.all())

    class Meta:
        model = ModuleFolder
        fields = ["id", "class_id", "title", "order_index", "created_by", "created_at", "updated_at"]
        read_only_fields = ["created_by", "created_at", "updated_at"]


class ModuleSerializer(serializers.ModelSerializer):
    class_id = serializers.PrimaryKeyRelatedField(source="classroom", queryset=Classroom.objects.all())
    folder_id = serializers.PrimaryKeyRelatedField(
        source="folder",
        queryset=ModuleFolder.objects.all(),
        required=False,
        allow_null=True,
    )

    class Meta:
        model = Module
        fields = [
            "id",
            "class_id",
            "folder_id",
            "title",
            "content",
            "order_index",
            "created_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["created_by", "created_at", "updated_at"]

    def validate(self, attrs):
        folder = attrs.get("folder", getattr(self.instance, "folder", None))
        classroom = attrs.get("classroom", getattr(self.instance, "classroom", None))
        if folder is not None and classroom is not None and folder.classroom_id != classroom.id:
            raise serializers.ValidationError({"folder_id": "Folder does not belong to this class"})
        return attrs


class AssignmentSerializer(serializers.ModelSerializer):
    class_id = serializers.PrimaryKeyRelatedField(source="classroom", queryset=Classroom.objects.all())

    class Meta:
        model = Assignment
        fields = [
            "id",
            "class_id",
            "title",
            "description",
            "deadline",
            "created_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["created_by", "created_at", "updated_at"]
