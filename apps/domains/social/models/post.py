from django.conf import settings
from django.db import models

from apps.api.common.models import TimestampModel
from apps.domains.linking.models import EntityLink


class Post(TimestampModel):
    """피드 게시물. 로그인 사용자 누구나 작성."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="posts",
    )
    content = models.TextField()
    image_url = models.URLField(max_length=255, blank=True, null=True)

    class Meta:
        db_table = "posts"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"Post#{self.pk} by {self.user_id}"


class PostLink(EntityLink):
    owner = models.OneToOneField(
        Post,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="link",
        db_column="posts_id",
    )

    class Meta(EntityLink.Meta):
        db_table = "posts_entities"
