"""Save data for worlds: entity ids, entity components and world metadata."""

from __future__ import annotations

import json
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import msgpack

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


class SerializationError(Exception):
    """World data could not be written."""


class DeserializationError(Exception):
    """World data could not be read."""


def _check_uint(value: Any, maximum: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= maximum:
        raise ValueError(f"{what} {value} is out of range")
    return value


def _require(data: Any, key: str) -> Any:
    if not isinstance(data, Mapping):
        raise TypeError(f"expected an object, got {type(data).__name__}")
    if key not in data:
        raise KeyError(f"missing field {key!r}")
    return data[key]


@dataclass(frozen=True)
class EntityIdData:
    """An entity id split into its slot index and generation."""

    index: int
    generation: int

    def __post_init__(self) -> None:
        _check_uint(self.index, _U32_MAX, "index")
        _check_uint(self.generation, _U32_MAX, "generation")

    @classmethod
    def from_raw(cls, raw: int) -> EntityIdData:
        """Split a 64-bit id: low 32 bits are the index, high 32 the generation."""
        _check_uint(raw, _U64_MAX, "raw id")
        return cls(index=raw & 0xFFFFFFFF, generation=(raw >> 32) & 0xFFFFFFFF)

    def to_raw(self) -> int:
        return (self.generation << 32) | self.index

    def to_dict(self) -> dict[str, int]:
        return {"index": self.index, "generation": self.generation}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EntityIdData:
        return cls(index=_require(data, "index"), generation=_require(data, "generation"))


@dataclass
class EntityData:
    """One entity and its components, keyed by component name."""

    id: EntityIdData
    components: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id.to_dict(), "components": dict(self.components)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EntityData:
        components = _require(data, "components")
        if not isinstance(components, Mapping) or not all(
            isinstance(name, str) for name in components
        ):
            raise TypeError("components must map names to values")
        return cls(id=EntityIdData.from_dict(_require(data, "id")), components=dict(components))


def _now() -> int:
    return max(int(time.time()), 0)


@dataclass
class WorldData:
    """A complete saved world."""

    version: int = 1
    timestamp: int = field(default_factory=_now)
    entities: list[EntityData] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "timestamp": self.timestamp,
            "entities": [entity.to_dict() for entity in self.entities],
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorldData:
        """Build from a plain mapping; raises DeserializationError on bad input."""
        try:
            version = _check_uint(_require(data, "version"), _U32_MAX, "version")
            timestamp = _check_uint(_require(data, "timestamp"), _U64_MAX, "timestamp")
            entities = _require(data, "entities")
            if not isinstance(entities, list):
                raise TypeError("entities must be a list")
            metadata = _require(data, "metadata")
            if not isinstance(metadata, Mapping) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in metadata.items()
            ):
                raise TypeError("metadata must map strings to strings")
            return cls(
                version=version,
                timestamp=timestamp,
                entities=[EntityData.from_dict(entity) for entity in entities],
                metadata=dict(metadata),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise DeserializationError(f"invalid world data: {exc}") from exc

    def to_json_string(self) -> str:
        """Pretty-printed JSON."""
        try:
            return json.dumps(self.to_dict(), indent=2)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"JSON serialization failed: {exc}") from exc

    def to_json_bytes(self) -> bytes:
        return self.to_json_string().encode("utf-8")

    def to_binary_bytes(self) -> bytes:
        try:
            return msgpack.packb(self.to_dict(), use_bin_type=True)
        except (TypeError, ValueError, OverflowError) as exc:
            raise SerializationError(f"Binary serialization failed: {exc}") from exc

    @classmethod
    def from_json_string(cls, text: str) -> WorldData:
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise DeserializationError(f"JSON deserialization failed: {exc}") from exc
        return cls.from_dict(data)

    @classmethod
    def from_json_bytes(cls, data: bytes) -> WorldData:
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DeserializationError(f"JSON deserialization failed: {exc}") from exc
        return cls.from_json_string(text)

    @classmethod
    def from_binary_bytes(cls, data: bytes) -> WorldData:
        try:
            decoded = msgpack.unpackb(bytes(data), raw=False)
        except (ValueError, TypeError) as exc:
            raise DeserializationError(f"Binary deserialization failed: {exc}") from exc
        return cls.from_dict(decoded)

    def entity_count(self) -> int:
        return len(self.entities)

    def add_entity(self, entity: EntityData) -> None:
        self.entities.append(entity)

    def add_metadata(self, key: str, value: str) -> None:
        self.metadata[key] = value