"""
Entity Registry: 링크 가능한 엔티티 종류(class/module/assignment)와
종류별 존재 확인 / 제목 조회.

새 종류 추가 = EntityKind 멤버 + LinkableEntity 1개 등록.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from django.apps import apps
from django.db import models

from .errors import InvalidEntityKind


class EntityKind(models.TextChoices):
    CLASS = "class", "Class"
    MODULE = "module", "Module"
    ASSIGNMENT = "assignment", "Assignment"


@dataclass(frozen=True)
class LinkableEntity:
    """한 종류의 링크 대상. 모델은 app registry에서 lazy 조회."""
    kind: str
    model_label: str
    title_field: str = "title"

    @property
    def model(self):
        return apps.get_model(self.model_label)

    def exists(self, entity_id) -> bool:
        return self.model.objects.filter(pk=entity_id).exists()

    def title_of(self, entity_id) -> Optional[str]:
        return (
            self.model.objects.filter(pk=entity_id)
            .values_list(self.title_field, flat=True)
            .first()
        )

    def titles_for(self, entity_ids: Iterable[int]) -> dict[int, str]:
        ids = {int(i) for i in entity_ids}
        if not ids:
            return {}
        return dict(
            self.model.objects.filter(pk__in=ids).values_list("pk", self.title_field)
        )


class EntityRegistry:
    def __init__(self, entries: Iterable[LinkableEntity]):
        self._entries = {e.kind: e for e in entries}

    def kinds(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def is_valid(self, kind) -> bool:
        return kind in self._entries

    def validate_kind(self, kind) -> str:
        if not self.is_valid(kind):
            raise InvalidEntityKind(kind)
        return kind

    def get(self, kind) -> LinkableEntity:
        return self._entries[self.validate_kind(kind)]

    def exists(self, kind, entity_id) -> bool:
        return self.get(kind).exists(entity_id)

    def title_of(self, kind, entity_id) -> Optional[str]:
        return self.get(kind).title_of(entity_id)

    def titles_for(self, kind, entity_ids: Iterable[int]) -> dict[int, str]:
        return self.get(kind).titles_for(entity_ids)


entity_registry = EntityRegistry([
    LinkableEntity(EntityKind.CLASS.value, "classroom.Classroom"),
    LinkableEntity(EntityKind.MODULE.value, "classroom.Module"),
    LinkableEntity(EntityKind.ASSIGNMENT.value, "classroom.Assignment"),
])
