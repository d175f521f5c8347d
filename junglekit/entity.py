"""Entity handles and their identifiers."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

__all__ = ["EntityId", "Entity", "new_entity_id", "new_entity"]


@dataclass(frozen=True)
class EntityId:
    """Unique identifier of an entity, backed by a UUID."""

    value: uuid.UUID

    def short(self) -> str:
        """Return the first eight hexadecimal characters of the identifier."""
        return self.value.hex[:8]

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Entity:
    """Lightweight handle to an entity in the game world."""

    id: EntityId

    def default_node_name(self) -> str:
        """Name given to the node that a freshly created entity carries."""
        return f"entity_{self.id.short()}"

    def __str__(self) -> str:
        return str(self.id)


def new_entity_id() -> EntityId:
    """Create a new random entity identifier."""
    return EntityId(uuid.uuid4())


def new_entity() -> Entity:
    """Create an entity handle with a fresh random identifier."""
    return Entity(new_entity_id())