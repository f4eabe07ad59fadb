from django.conf import settings
from django.db import models

from apps.api.common.models import TimestampModel
from apps.domains.linking.models import EntityLink


class News(TimestampModel):
    """공지(뉴스). 작성은 aslab만. 선택적으로 class/module/assignment 1개에 링크."""
    title = models.CharField(max_length=100)
    content = models.TextField()
    image_url = models.URLField(max_length=255, blank=True, null=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="news",
    )

    class Meta:
        db_table = "news"
        ordering = ["-created_at", "-id"]
        verbose_name = "News"
        verbose_name_plural = "News"

    def __str__(self):
        return self.title


class NewsLink(EntityLink):
    owner = models.OneToOneField(
        News,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="link",
        db_column="news_id",
    )

    class Meta(EntityLink.Meta):
        db_table = "news_entities"
