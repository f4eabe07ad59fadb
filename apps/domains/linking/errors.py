"""링크 관련 예외. DRF 예외를 상속해 상태코드(400/404)가 그대로 매핑된다."""
from rest_framework.exceptions import NotFound, ValidationError


class InvalidEntityKind(ValidationError):
    default_detail = "Invalid entity type"
    default_code = "invalid_entity_type"

    def __init__(self, kind=None):
        self.kind = kind
        super().__init__({"detail": self.default_detail}, code=self.default_code)


class EntityNotFound(NotFound):
    default_code = "entity_not_found"

    def __init__(self, kind: str, entity_id):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{str(kind).capitalize()} not found")
