"""Concrete resource kinds: textures, audio and raw data."""

from __future__ import annotations

import math
from collections.abc import Iterable

from archetype_ecs.resources.resource import Resource


class TextureResource(Resource):
    """Image pixels with their dimensions."""

    def __init__(self, path: str, width: int, height: int, data: bytes) -> None:
        self._path = path
        self.width = width
        self.height = height
        self.data = bytearray(data)

    @property
    def path(self) -> str:
        return self._path

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def type_name(self) -> str:
        return "Texture"

    def unload(self) -> None:
        self.data.clear()

    def reload(self) -> None:
        """Nothing is reread; the data stays as it is."""

    def is_valid(self) -> bool:
        return bool(self.data)


class AudioResource(Resource):
    """Interleaved float samples."""

    def __init__(
        self, path: str, sample_rate: int, channels: int, data: Iterable[float]
    ) -> None:
        self._path = path
        self.sample_rate = sample_rate
        self.channels = channels
        self.data = list(data)

    def duration_seconds(self) -> float:
        frames_per_second = self.sample_rate * self.channels
        if frames_per_second == 0:
            return math.inf if self.data else math.nan
        return len(self.data) / frames_per_second

    @property
    def path(self) -> str:
        return self._path

    @property
    def size(self) -> int:
        """Four bytes per sample."""
        return len(self.data) * 4

    @property
    def type_name(self) -> str:
        return "Audio"

    def unload(self) -> None:
        self.data.clear()

    def reload(self) -> None:
        """Nothing is reread; the samples stay as they are."""

    def is_valid(self) -> bool:
        return bool(self.data)


class DataResource(Resource):
    """Arbitrary binary data; data is mutable in place."""

    def __init__(self, path: str, data: bytes) -> None:
        self._path = path
        self.data = bytearray(data)

    @property
    def path(self) -> str:
        return self._path

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def type_name(self) -> str:
        return "Data"

    def unload(self) -> None:
        self.data.clear()

    def reload(self) -> None:
        """Nothing is reread; the data stays as it is."""

    def is_valid(self) -> bool:
        return bool(self.data)