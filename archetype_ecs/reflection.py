"""Runtime reflection: named fields, value application and a type registry."""

from __future__ import annotations

import copy
import struct
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, ClassVar, Iterable


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class Reflect:
    """Mixin giving a class a reflected name, field list, cloning and apply.

    Field names are declared on the class statement: ``class P(Reflect, fields=("x", "y"))``.
    """

    _reflect_fields: ClassVar[tuple[str, ...]] = ()

    def __init_subclass__(cls, fields: Iterable[str] | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if fields is not None:
            cls._reflect_fields = tuple(fields)

    def type_name(self) -> str:
        return _qualified_name(type(self))

    def apply(self, value: Reflect) -> None:
        """Take on the state of value if it is exactly the same type; otherwise do nothing."""
        if type(value) is type(self):
            state = copy.deepcopy(vars(value))
            vars(self).clear()
            vars(self).update(state)

    def reflect_clone(self) -> Reflect:
        return copy.deepcopy(self)

    def field_count(self) -> int:
        return len(self._reflect_fields)

    def field_name(self, index: int) -> str | None:
        if 0 <= index < len(self._reflect_fields):
            return self._reflect_fields[index]
        return None


class ReflectKind(Enum):
    BOOL = auto()
    I32 = auto()
    U32 = auto()
    F32 = auto()
    F64 = auto()
    STRING = auto()
    USIZE = auto()


_INT_RANGES = {
    ReflectKind.I32: (-(2**31), 2**31 - 1),
    ReflectKind.U32: (0, 2**32 - 1),
    ReflectKind.USIZE: (0, 2**64 - 1),
}


def _to_f32(number: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", number))[0]
    except OverflowError as exc:
        raise ValueError(f"{number} does not fit in a 32-bit float") from exc


@dataclass
class ReflectValue(Reflect):
    """A primitive value tagged with its kind."""

    kind: ReflectKind
    value: Any

    def __post_init__(self) -> None:
        kind, value = self.kind, self.value
        if kind is ReflectKind.BOOL:
            if not isinstance(value, bool):
                raise TypeError(f"{kind.name} needs a bool, got {type(value).__name__}")
        elif kind in _INT_RANGES:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{kind.name} needs an int, got {type(value).__name__}")
            low, high = _INT_RANGES[kind]
            if not low <= value <= high:
                raise ValueError(f"{value} is out of range for {kind.name}")
        elif kind in (ReflectKind.F32, ReflectKind.F64):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{kind.name} needs a number, got {type(value).__name__}")
            self.value = _to_f32(float(value)) if kind is ReflectKind.F32 else float(value)
        elif kind is ReflectKind.STRING:
            if not isinstance(value, str):
                raise TypeError(f"{kind.name} needs a str, got {type(value).__name__}")

    def apply(self, value: Reflect) -> None:
        if isinstance(value, ReflectValue) and value.kind is self.kind:
            self.value = value.value


@dataclass(frozen=True)
class TypeRegistration:
    type_name: str
    type_: type
    default_factory: Callable[[], Any]
    field_names: tuple[str, ...] = ()

    def create_default(self) -> Any:
        return self.default_factory()


class TypeRegistry:
    """Registrations of reflected types, keyed by type."""

    def __init__(self) -> None:
        self._registrations: dict[type, TypeRegistration] = {}

    def register(self, cls: type, field_names: Iterable[str] = ()) -> None:
        """Register cls, whose no-argument call yields its default value."""
        if not isinstance(cls, type):
            raise TypeError(f"expected a class, got {cls!r}")
        self._registrations[cls] = TypeRegistration(
            type_name=_qualified_name(cls),
            type_=cls,
            default_factory=cls,
            field_names=tuple(field_names),
        )

    def get(self, type_: type) -> TypeRegistration | None:
        return self._registrations.get(type_)

    def __len__(self) -> int:
        return len(self._registrations)