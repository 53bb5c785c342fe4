"""Ready-made serializable components and an entity-data builder."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from archetype_ecs.serialization import EntityData, EntityIdData


@dataclass
class SerializablePosition:
    x: float
    y: float
    z: float


@dataclass
class SerializableHealth:
    hp: float
    max_hp: float


@dataclass
class SerializableInventory:
    items: list[str]
    max_slots: int


@dataclass
class SerializableVelocity:
    vx: float
    vy: float
    vz: float


@dataclass
class SerializableName:
    name: str


def build_entity_data(
    index: int, generation: int, components: Iterable[tuple[str, Any]]
) -> EntityData:
    """Build entity data from (component name, value) pairs; later names win."""
    return EntityData(
        id=EntityIdData(index=index, generation=generation),
        components={name: value for name, value in components},
    )