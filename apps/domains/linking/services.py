"""
Linked-Resource Facade: owner 레코드(News/Post) CRUD + 링크 + 소유자 정책.

검증 순서: owner 존재(404) → 소유자 정책(403) → 링크 대상 종류(400) / 존재(404).
업로드는 트랜잭션 밖에서 먼저 수행하고, owner 쓰기와 링크 쓰기는
하나의 transaction.atomic() 으로 묶는다.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Optional

from django.core.exceptions import ObjectDoesNotExist
from django.db import transaction
from rest_framework.exceptions import NotFound, PermissionDenied

from apps.core.permissions import can_mutate
from libs.s3_client import upload_file
from .registry import EntityRegistry, entity_registry
from .store import LinkRef, LinkStore

logger = logging.getLogger(__name__)


def link_of(record):
    """reverse OneToOne(link): 없으면 None."""
    try:
        return record.link
    except ObjectDoesNotExist:
        return None


class LinkedResourceService:
    model = None
    link_model = None
    owner_field = "created_by"
    create_requires_privileged = False
    upload_folder = "uploads"
    label = "Record"

    def __init__(self, registry: EntityRegistry = entity_registry):
        self.registry = registry
        self.links = LinkStore(self.link_model, registry)

    # ------------------------------------------------------------------
    # read
    # ------------------------------------------------------------------

    def list_queryset(self):
        return (
            self.model.objects.select_related(self.owner_field, "link")
            .order_by("-created_at", "-id")
        )

    def hydrate(self, records: Iterable) -> list:
        """
        linked_type / linked_id 와 <kind>_title / <kind>_id 를 레코드에 붙인다.
        제목은 종류별 1쿼리.
        """
        records = list(records)
        ids_by_kind = defaultdict(set)
        for record in records:
            link = link_of(record)
            if link is not None:
                ids_by_kind[link.entity_type].add(link.entity_id)

        titles = {
            kind: self.registry.titles_for(kind, ids)
            for kind, ids in ids_by_kind.items()
        }

        for record in records:
            link = link_of(record)
            record.linked_type = link.entity_type if link else None
            record.linked_id = link.entity_id if link else None
            for kind in self.registry.kinds():
                matched = link is not None and link.entity_type == kind
                title = titles.get(kind, {}).get(link.entity_id) if matched else None
                setattr(record, f"{kind}_title", title)
                setattr(record, f"{kind}_id", link.entity_id if matched and title is not None else None)
        return records

    def get(self, owner_id):
        record = self.list_queryset().filter(pk=owner_id).first()
        if record is None:
            raise NotFound(f"{self.label} not found")
        return self.hydrate([record])[0]

    def list_all(self) -> list:
        return self.hydrate(self.list_queryset())

    def list_by_entity(self, kind, entity_id) -> list:
        owner_ids = self.links.list_owners_linked_to(kind, entity_id)
        by_id = self.list_queryset().in_bulk(owner_ids)
        return self.hydrate(by_id[pk] for pk in owner_ids if pk in by_id)

    # ------------------------------------------------------------------
    # write
    # ------------------------------------------------------------------

    def _get_for_mutation(self, actor, owner_id):
        record = self.model.objects.filter(pk=owner_id).first()
        if record is None:
            raise NotFound(f"{self.label} not found")
        if not can_mutate(actor, record, self.owner_field):
            raise PermissionDenied(f"Not authorized to modify this {self.label.lower()}")
        return record

    def _upload(self, image) -> Optional[str]:
        if image is None:
            return None
        return upload_file(image, self.upload_folder)

    def ensure_can_create(self, actor) -> None:
        if self.create_requires_privileged and not getattr(actor, "is_privileged", False):
            raise PermissionDenied(f"Not authorized to create {self.label.lower()}")

    def create(self, actor, fields: dict, target: Optional[LinkRef] = None, image=None):
        self.ensure_can_create(actor)
        if target is not None:
            self.links.validate_target(target.kind, target.entity_id)

        fields = dict(fields)
        image_url = self._upload(image)
        if image_url:
            fields["image_url"] = image_url

        with transaction.atomic():
            record = self.model.objects.create(**{self.owner_field: actor}, **fields)
            if target is not None:
                self.links.set_link(record.pk, target.kind, target.entity_id)

        logger.info(
            "%s created: id=%s actor=%s link=%s",
            self.label, record.pk, actor.pk, target,
        )
        return self.get(record.pk)

    def update(self, actor, owner_id, fields: dict, target: Optional[LinkRef] = None, image=None):
        """target 생략 = 기존 링크 제거."""
        self._get_for_mutation(actor, owner_id)
        if target is not None:
            self.links.validate_target(target.kind, target.entity_id)

        fields = dict(fields)
        image_url = self._upload(image)
        if image_url:
            fields["image_url"] = image_url

        with transaction.atomic():
            record = self.model.objects.select_for_update().filter(pk=owner_id).first()
            if record is None:
                raise NotFound(f"{self.label} not found")
            for name, value in fields.items():
                setattr(record, name, value)
            record.save(update_fields=[*fields, "updated_at"])
            if target is not None:
                self.links.set_link(owner_id, target.kind, target.entity_id)
            else:
                self.links.clear_link(owner_id)

        logger.info(
            "%s updated: id=%s actor=%s link=%s",
            self.label, owner_id, actor.pk, target,
        )
        return self.get(owner_id)

    def remove(self, actor, owner_id) -> None:
        record = self._get_for_mutation(actor, owner_id)
        record.delete()
        logger.info("%s deleted: id=%s actor=%s", self.label, owner_id, actor.pk)

    def link(self, actor, owner_id, kind, entity_id) -> LinkRef:
        self._get_for_mutation(actor, owner_id)
        with transaction.atomic():
            ref = self.links.set_link(owner_id, kind, entity_id)
        logger.info("%s linked: id=%s → %s#%s", self.label, owner_id, ref.kind, ref.entity_id)
        return ref

    def unlink(self, actor, owner_id) -> None:
        self._get_for_mutation(actor, owner_id)
        with transaction.atomic():
            removed = self.links.clear_link(owner_id)
        logger.info("%s unlinked: id=%s removed=%s", self.label, owner_id, removed)
