from .errors import EntityNotFound, InvalidEntityKind
from .registry import EntityKind, EntityRegistry, LinkableEntity, entity_registry
from .store import LinkRef, LinkStore

__all__ = [
    "EntityNotFound",
    "InvalidEntityKind",
    "EntityKind",
    "EntityRegistry",
    "LinkableEntity",
    "entity_registry",
    "LinkRef",
    "LinkStore",
]
