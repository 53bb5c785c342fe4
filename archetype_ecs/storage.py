"""Saving, loading and managing world save files."""

from __future__ import annotations

import os
import shutil
from enum import Enum
from pathlib import Path
from typing import Union

from archetype_ecs.serialization import (
    DeserializationError,
    SerializationError,
    WorldData,
)

PathLike = Union[str, "os.PathLike[str]"]


class SerializationFormat(Enum):
    JSON = "json"
    BINARY = "binary"


def save_world(world: WorldData, path: PathLike, format: SerializationFormat) -> None:
    if format is SerializationFormat.JSON:
        data = world.to_json_bytes()
    else:
        data = world.to_binary_bytes()
    try:
        Path(path).write_bytes(data)
    except OSError as exc:
        raise SerializationError(f"Failed to write save file: {exc}") from exc


def load_world(path: PathLike, format: SerializationFormat) -> WorldData:
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise DeserializationError(f"Failed to read save file: {exc}") from exc
    if format is SerializationFormat.JSON:
        return WorldData.from_json_bytes(data)
    return WorldData.from_binary_bytes(data)


def get_file_size(path: PathLike) -> int:
    try:
        return Path(path).stat().st_size
    except OSError as exc:
        raise SerializationError(f"Failed to get file size: {exc}") from exc


def list_saves(directory: PathLike) -> list[str]:
    """Names of the files in directory, which is created if missing."""
    folder = Path(directory)
    try:
        folder.mkdir(parents=True, exist_ok=True)
        return sorted(entry.name for entry in folder.iterdir() if entry.is_file())
    except OSError as exc:
        raise SerializationError(f"Failed to read directory: {exc}") from exc


def delete_save(path: PathLike) -> None:
    try:
        Path(path).unlink()
    except OSError as exc:
        raise SerializationError(f"Failed to delete save file: {exc}") from exc


def backup_save(source: PathLike, backup: PathLike) -> None:
    try:
        shutil.copy(source, backup)
    except OSError as exc:
        raise SerializationError(f"Failed to create backup: {exc}") from exc