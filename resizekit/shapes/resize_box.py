"""Resize helpers shared by box-like shape types."""

from __future__ import annotations

import math

from PyQt6.QtCore import QPointF

from resizekit.config.constants import MIN_SCALE_FACTOR, MIN_SHAPE_SIZE
from resizekit.core.geometry import rotate_point
from resizekit.core.resize_options import (
    CORNER_HANDLES,
    LEFT_HANDLES,
    TOP_HANDLES,
    ResizeHandle,
    ResizeInfo,
)
from resizekit.core.shape import Shape, ShapePartial


def _resize_extent(
    size: float,
    minimum: float,
    moves_near_edge: bool,
    is_cross_edge: bool,
) -> tuple[float, float]:
    """Return ``(new_size, offset)`` for one axis of a scaled box.

    *size* is the scaled (possibly negative) extent. A negative extent means
    the box was flipped, so its origin moves back by the flipped extent.
    """
    offset = 0.0
    if size > 0:
        if size < minimum:
            if moves_near_edge:
                offset = size - minimum
            elif is_cross_edge:
                offset = (size - minimum) / 2
            size = minimum
    else:
        offset = size
        size = -size
        if size < minimum:
            offset = -size if moves_near_edge else -minimum
            size = minimum
    return size, offset


def resize_box(
    shape: Shape,
    info: ResizeInfo,
    min_width: float = MIN_SHAPE_SIZE,
    min_height: float = MIN_SHAPE_SIZE,
    max_width: float = math.inf,
    max_height: float = math.inf,
) -> ShapePartial:
    """Scale a shape's ``w``/``h`` props and place it at ``info.new_point``.

    Flipped (negative) factors keep the box's size positive and move its
    origin along the shape's own rotation instead.
    """
    handle = info.handle
    w, offset_x = _resize_extent(
        shape.props["w"] * info.scale_x,
        min_width,
        handle in LEFT_HANDLES,
        handle in (ResizeHandle.TOP, ResizeHandle.BOTTOM),
    )
    h, offset_y = _resize_extent(
        shape.props["h"] * info.scale_y,
        min_height,
        handle in TOP_HANDLES,
        handle in (ResizeHandle.LEFT, ResizeHandle.RIGHT),
    )
    offset = rotate_point(QPointF(offset_x, offset_y), QPointF(), shape.rotation)
    return {
        "x": info.new_point.x() + offset.x(),
        "y": info.new_point.y() + offset.y(),
        "props": {"w": min(max_width, w), "h": min(max_height, h)},
    }


def resize_scaled(shape: Shape, info: ResizeInfo) -> ShapePartial:
    """Scale a shape uniformly, picking the factor from the dragged handle.

    Used by shapes whose contents scale as a whole (text). The factor is
    stored in the ``scale`` prop rather than stretching ``w``/``h``.
    """
    handle = info.handle
    if handle in CORNER_HANDLES:
        delta = max(abs(info.scale_x), abs(info.scale_y))
    elif handle in (ResizeHandle.LEFT, ResizeHandle.RIGHT):
        delta = abs(info.scale_x)
    else:
        delta = abs(info.scale_y)
    delta = max(MIN_SCALE_FACTOR, delta)

    bounds = info.initial_bounds
    offset_x = -bounds.width() * delta if info.scale_x < 0 else 0.0
    offset_y = -bounds.height() * delta if info.scale_y < 0 else 0.0
    offset = rotate_point(QPointF(offset_x, offset_y), QPointF(), shape.rotation)
    return {
        "x": info.new_point.x() + offset.x(),
        "y": info.new_point.y() + offset.y(),
        "props": {"scale": info.initial_shape.props.get("scale", 1.0) * delta},
    }
