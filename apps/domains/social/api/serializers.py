from rest_framework import serializers

from apps.domains.linking.serializers import LinkedRecordSerializer, LinkTargetInputMixin
from apps.domains.social.models import Post, Comment


class CommentSerializer(serializers.ModelSerializer):
    username = serializers.CharField(source="user.username", read_only=True)
    profile_image = serializers.CharField(source="user.profile_image", read_only=True, default=None)

    class Meta:
        model = Comment
        fields = [
            "id",
            "post",
            "user",
            "username",
            "profile_image",
            "content",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["post", "user", "created_at", "updated_at"]


class PostSerializer(LinkedRecordSerializer):
    username = serializers.CharField(source="user.username", read_only=True)
    profile_image = serializers.CharField(source="user.profile_image", read_only=True, default=None)
    comment_count = serializers.IntegerField(read_only=True, default=0)

    class Meta:
        model = Post
        fields = [
            "id",
            "user",
            "username",
            "profile_image",
            "content",
            "image_url",
            "comment_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class PostDetailSerializer(PostSerializer):
    """단건 조회: 댓글 목록 포함 (view에서 comments 속성 주입)."""
    comments = CommentSerializer(source="comments_list", many=True, read_only=True)

    class Meta(PostSerializer.Meta):
        fields = PostSerializer.Meta.fields + ["comments"]
        read_only_fields = fields


class PostWriteSerializer(LinkTargetInputMixin):
    content = serializers.CharField()
    image = serializers.FileField(required=False, write_only=True)
