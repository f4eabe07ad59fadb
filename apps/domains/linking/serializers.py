from rest_framework import serializers

from .registry import EntityKind, entity_registry
from .store import LinkRef


def link_fields(instance) -> dict:
    """LinkedResourceService.hydrate 가 붙인 속성 → 응답 필드."""
    data = {
        "linked_type": getattr(instance, "linked_type", None),
        "linked_id": getattr(instance, "linked_id", None),
    }
    for kind in entity_registry.kinds():
        data[f"{kind}_title"] = getattr(instance, f"{kind}_title", None)
        data[f"{kind}_id"] = getattr(instance, f"{kind}_id", None)
    return data


class LinkedRecordSerializer(serializers.ModelSerializer):
    """owner 레코드 출력 + 링크 비정규화 필드."""

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data.update(link_fields(instance))
        return data


class LinkTargetInputMixin(serializers.Serializer):
    """
    entityType / entityId 입력 (linkedType / linkedId 별칭 허용).
    둘 다 있거나 둘 다 없어야 한다. validated_data["target"] 에 LinkRef 또는 None.
    """
    entityType = serializers.ChoiceField(
        choices=EntityKind.choices, required=False, allow_blank=True, allow_null=True,
        error_messages={"invalid_choice": "Invalid entity type"},
    )
    entityId = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    linkedType = serializers.ChoiceField(
        choices=EntityKind.choices, required=False, allow_blank=True, allow_null=True,
        error_messages={"invalid_choice": "Invalid linked entity type"},
    )
    linkedId = serializers.IntegerField(required=False, allow_null=True, min_value=1)

    @staticmethod
    def _pick(attrs, name, alias):
        """본 필드와 별칭 중 값이 있는 쪽. 둘 다 있고 값이 다르면 400."""
        value = attrs.pop(name, None)
        aliased = attrs.pop(alias, None)
        if value in ("", None):
            return aliased if aliased != "" else None
        if aliased not in ("", None) and aliased != value:
            raise serializers.ValidationError(
                {alias: f"Conflicts with {name}."}
            )
        return value

    def validate(self, attrs):
        attrs = super().validate(attrs)
        kind = self._pick(attrs, "entityType", "linkedType")
        entity_id = self._pick(attrs, "entityId", "linkedId")

        if kind and entity_id is not None:
            attrs["target"] = LinkRef(kind, entity_id)
        elif kind or entity_id is not None:
            raise serializers.ValidationError(
                {"entityId": "entityType and entityId must be provided together."}
            )
        else:
            attrs["target"] = None
        return attrs
