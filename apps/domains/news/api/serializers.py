from rest_framework import serializers

from apps.domains.linking.serializers import LinkedRecordSerializer, LinkTargetInputMixin
from apps.domains.news.models import News


class NewsSerializer(LinkedRecordSerializer):
    author = serializers.CharField(source="created_by.username", read_only=True, default=None)

    class Meta:
        model = News
        fields = [
            "id",
            "title",
            "content",
            "image_url",
            "created_by",
            "author",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class NewsWriteSerializer(LinkTargetInputMixin):
    """POST/PUT 본문. JSON 또는 multipart(image)."""
    title = serializers.CharField(max_length=100)
    content = serializers.CharField()
    image = serializers.FileField(required=False, write_only=True)
