"""Resize options, drag handles and the info bundle handed to shape types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from PyQt6.QtCore import QPointF, QRectF
from PyQt6.QtGui import QTransform

from resizekit.config.constants import DEFAULT_RESIZE_HANDLE, DEFAULT_RESIZE_MODE

if TYPE_CHECKING:
    from resizekit.core.shape import Shape


class ResizeHandle(Enum):
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"


# Handles that drag two edges at once
CORNER_HANDLES = {
    ResizeHandle.TOP_LEFT,
    ResizeHandle.TOP_RIGHT,
    ResizeHandle.BOTTOM_LEFT,
    ResizeHandle.BOTTOM_RIGHT,
}

# Handles that move the left edge of the box
LEFT_HANDLES = {ResizeHandle.LEFT, ResizeHandle.TOP_LEFT, ResizeHandle.BOTTOM_LEFT}

# Handles that move the top edge of the box
TOP_HANDLES = {ResizeHandle.TOP, ResizeHandle.TOP_LEFT, ResizeHandle.TOP_RIGHT}


class ResizeMode(Enum):
    """How a shape type should interpret a resize.

    ``SCALE_SHAPE`` scales the whole shape proportionally (e.g. as part of a
    scaled selection); ``RESIZE_BOUNDS`` lets a type change its box instead.
    """

    SCALE_SHAPE = "scale_shape"
    RESIZE_BOUNDS = "resize_bounds"


@dataclass(frozen=True)
class ResizeOptions:
    """Optional overrides for a single resize computation.

    Any field left as ``None`` is resolved from the shape graph. Callers that
    resize repeatedly during a drag should pass the same initial snapshot on
    every call so results never compound.
    """

    initial_shape: Shape | None = None
    initial_bounds: QRectF | None = None
    initial_page_transform: QTransform | None = None
    scale_origin: QPointF | None = None
    scale_axis_rotation: float | None = None
    drag_handle: ResizeHandle = ResizeHandle(DEFAULT_RESIZE_HANDLE)
    mode: ResizeMode = ResizeMode(DEFAULT_RESIZE_MODE)


@dataclass(frozen=True)
class ResizeInfo:
    """Everything a shape type's ``on_resize`` callback receives."""

    new_point: QPointF
    handle: ResizeHandle
    mode: ResizeMode
    scale_x: float
    scale_y: float
    initial_bounds: QRectF
    initial_shape: Shape
