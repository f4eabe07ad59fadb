from django.db import models

from .registry import EntityKind


class EntityLink(models.Model):
    """
    owner 1개당 링크 1행 (owner id가 PK). 구체 모델에서 정의:

        owner = models.OneToOneField(Owner, primary_key=True, on_delete=models.CASCADE,
                                     related_name="link", db_column="..._id")
    """
    entity_type = models.CharField(max_length=20, choices=EntityKind.choices)
    entity_id = models.PositiveBigIntegerField()

    class Meta:
        abstract = True
        indexes = [
            models.Index(fields=["entity_type", "entity_id"], name="%(app_label)s_%(class)s_target"),
        ]

    def __str__(self):
        return f"{self.pk} → {self.entity_type}#{self.entity_id}"
