"""Reading resources and listing resource files from disk."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from archetype_ecs.resources.asset_types import DataResource
from archetype_ecs.resources.resource import ResourceLoadError

PathLike = Union[str, "os.PathLike[str]"]


def load_binary(path: PathLike) -> DataResource:
    """Read a file whole into a DataResource."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise ResourceLoadError(f"Failed to load file {path}: {exc}") from exc
    return DataResource(os.fspath(path), data)


def load_text(path: PathLike) -> str:
    """Read a file whole as UTF-8 text."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceLoadError(f"Failed to load file {path}: {exc}") from exc


def file_exists(path: PathLike) -> bool:
    return Path(path).exists()


def get_file_size(path: PathLike) -> int:
    try:
        return Path(path).stat().st_size
    except OSError as exc:
        raise ResourceLoadError(f"Failed to get file size {path}: {exc}") from exc


def _extension(name: str) -> str | None:
    """Text after the last dot, or None when the name has no such dot."""
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


def list_files(directory: PathLike, extension: str) -> list[str]:
    """Names of the regular files in directory whose extension is extension (no dot)."""
    try:
        entries = list(Path(directory).iterdir())
    except OSError as exc:
        raise ResourceLoadError(f"Failed to read directory {directory}: {exc}") from exc
    return sorted(
        entry.name
        for entry in entries
        if entry.is_file() and _extension(entry.name) == extension
    )