from django.conf import settings
from django.db import models

from apps.api.common.models import TimestampModel
from .post import Post


class Comment(TimestampModel):
    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        related_name="comments",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="comments",
    )
    content = models.TextField()

    class Meta:
        db_table = "comments"
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"Comment to Post#{self.post_id}"
