from django.db import models


class TimestampModel(models.Model):
    """created_at / updated_at 공통 컬럼. 목록 정렬(-created_at)의 기준."""

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
