"""
Polymorphic Link Store: owner 1개당 링크 1행 CRUD.

모든 쓰기는 호출자의 transaction.atomic() 안에서 실행된다고 가정한다.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from rest_framework.exceptions import ValidationError

from .errors import EntityNotFound
from .registry import EntityRegistry, entity_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinkRef:
    kind: str
    entity_id: int


class LinkStore:
    def __init__(self, link_model, registry: EntityRegistry = entity_registry):
        self.link_model = link_model
        self.registry = registry

    def validate_target(self, kind, entity_id) -> LinkRef:
        """종류 검증(400) → 존재 확인(404). 쓰기 없음."""
        self.registry.validate_kind(kind)
        try:
            entity_id = int(entity_id)
        except (TypeError, ValueError):
            raise ValidationError({"entityId": "A valid integer is required."})
        if not self.registry.exists(kind, entity_id):
            logger.warning("link target missing: %s#%s", kind, entity_id)
            raise EntityNotFound(kind, entity_id)
        return LinkRef(kind, entity_id)

    def set_link(self, owner_id, kind, entity_id) -> LinkRef:
        """있으면 덮어쓰고 없으면 생성 (owner_id 기준 upsert)."""
        ref = self.validate_target(kind, entity_id)
        self.link_model.objects.update_or_create(
            owner_id=owner_id,
            defaults={"entity_type": ref.kind, "entity_id": ref.entity_id},
        )
        return ref

    def clear_link(self, owner_id) -> bool:
        deleted, _ = self.link_model.objects.filter(owner_id=owner_id).delete()
        return bool(deleted)

    def get_link(self, owner_id) -> Optional[LinkRef]:
        row = (
            self.link_model.objects.filter(owner_id=owner_id)
            .values_list("entity_type", "entity_id")
            .first()
        )
        if row is None:
            return None
        return LinkRef(*row)

    def list_owners_linked_to(self, kind, entity_id) -> list[int]:
        """해당 엔티티에 링크된 owner id 목록, owner 생성시각 내림차순."""
        self.registry.validate_kind(kind)
        return list(
            self.link_model.objects.filter(entity_type=kind, entity_id=entity_id)
            .order_by("-owner__created_at", "-owner_id")
            .values_list("owner_id", flat=True)
        )
