"""Small helpers."""

from __future__ import annotations

import itertools

_counter = itertools.count()


def next_id() -> int:
    """Return a process-wide unique, increasing id starting at 0."""
    return next(_counter)


def align_to(value: int, alignment: int) -> int:
    """Round value up to a multiple of alignment, which must be a power of two."""
    return (value + alignment - 1) & ~(alignment - 1)