"""Shape record model and partial-update merging."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from typing import Any

ShapePartial = dict[str, Any]

# Keys a partial can never change
_IMMUTABLE_KEYS = frozenset({"id", "type"})


@dataclass(frozen=True)
class Shape:
    """An immutable shape record.

    ``x``/``y`` and ``rotation`` are relative to the parent (``parent_id`` of
    ``None`` means the page). ``props`` holds the type-specific fields, e.g.
    ``w``/``h`` for box shapes or ``points`` for lines.
    """

    type: str
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    parent_id: str | None = None
    props: dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def with_position(self, x: float, y: float) -> Shape:
        """Return a copy moved to (x, y)."""
        return replace(self, x=x, y=y)


def apply_partial(shape: Shape, partial: ShapePartial | None) -> Shape:
    """Merge *partial* into *shape* and return the resulting record.

    Top-level fields are replaced; ``props`` is merged key by key. Returns
    *shape* itself when the partial changes nothing.
    """
    if not partial:
        return shape
    changes: dict[str, Any] = {}
    for key, value in partial.items():
        if value is None and key != "parent_id":
            continue
        if key in _IMMUTABLE_KEYS:
            continue
        if key == "props":
            merged = dict(shape.props)
            merged.update(value)
            if merged != shape.props:
                changes["props"] = merged
            continue
        if getattr(shape, key) == value:
            continue
        changes[key] = value
    if not changes:
        return shape
    return replace(shape, **changes)
