"""Shape resize engine.

:func:`get_resized_shape` computes the record a shape should have after being
scaled by ``scale`` about a scale origin along a (possibly rotated) scale
axis. Shapes whose rotation lines up with the scale axis are handed to their
type's ``on_resize`` callback; shapes that are skewed relative to the axis are
scaled uniformly and then rotated and moved so they do not shear.

Nothing here mutates the shape graph: results are new records the caller
merges into its store.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import Union

from PyQt6.QtCore import QPointF, QRectF
from PyQt6.QtGui import QTransform

from resizekit.core.errors import ReadOnlyViolation, ShapeNotFoundError
from resizekit.core.geometry import (
    angles_compatible,
    box_from_points,
    clamp_radians,
    decompose,
    inverted,
    is_multiple_of,
    local_transform,
    map_points,
    rotate_point,
    rotation_of,
    transform_origin,
)
from resizekit.core.resize_options import ResizeInfo, ResizeOptions
from resizekit.core.shape import Shape, apply_partial
from resizekit.core.shape_graph import ShapeGraphView

log = logging.getLogger(__name__)

ScaleLike = Union[QPointF, tuple[float, float]]


def _sanitize_scale(scale: ScaleLike) -> QPointF:
    """Return *scale* as a QPointF with non-finite components replaced by 1."""
    sx, sy = (scale.x(), scale.y()) if isinstance(scale, QPointF) else scale
    if not (math.isfinite(sx) and math.isfinite(sy)):
        log.debug("Replacing non-finite scale (%r, %r)", sx, sy)
    return QPointF(sx if math.isfinite(sx) else 1.0, sy if math.isfinite(sy) else 1.0)


def scale_page_point(
    point: QPointF,
    scale_origin: QPointF,
    scale: QPointF,
    scale_axis_rotation: float,
) -> QPointF:
    """Scale a page-space *point* about *scale_origin* along a rotated axis.

    The point is rotated into the scale axis frame, scaled relative to the
    origin, and rotated back. The steps do not commute.
    """
    p = rotate_point(point, scale_origin, -scale_axis_rotation)
    p = p - scale_origin
    p = QPointF(p.x() * scale.x(), p.y() * scale.y())
    p = p + scale_origin
    return rotate_point(p, scale_origin, scale_axis_rotation)


def _sign(value: float) -> float:
    return math.copysign(1.0, value) if value != 0 else 0.0


def get_resized_shape(
    graph: ShapeGraphView,
    shape: str | Shape,
    scale: ScaleLike,
    options: ResizeOptions | None = None,
) -> Shape:
    """Return the record *shape* should have after being resized by *scale*.

    Raises
    ------
    ReadOnlyViolation
        If the graph is read-only.
    ShapeNotFoundError
        If the shape, its page bounds, its page transform or its rotation
        cannot be resolved.
    """
    if options is None:
        options = ResizeOptions()
    shape_id = shape if isinstance(shape, str) else shape.id
    if graph.is_read_only:
        raise ReadOnlyViolation("Cannot resize shape in read-only mode")

    scale = _sanitize_scale(scale)

    initial_shape = options.initial_shape
    if initial_shape is None:
        initial_shape = graph.get_shape(shape_id)
    if initial_shape is None:
        raise ShapeNotFoundError(f"Shape {shape_id!r} not found")

    scale_origin = options.scale_origin
    if scale_origin is None:
        page_bounds = graph.get_shape_page_bounds(shape_id)
        if page_bounds is None:
            raise ShapeNotFoundError(f"Page bounds of shape {shape_id!r} not found")
        scale_origin = page_bounds.center()

    page_transform = options.initial_page_transform
    if page_transform is None:
        page_transform = graph.get_shape_page_transform(shape_id)
    if page_transform is None:
        raise ShapeNotFoundError(f"Page transform of shape {shape_id!r} not found")

    page_rotation = rotation_of(page_transform)
    if math.isnan(page_rotation):
        raise ShapeNotFoundError(f"Page rotation of shape {shape_id!r} not found")

    scale_axis_rotation = options.scale_axis_rotation
    if scale_axis_rotation is None:
        scale_axis_rotation = page_rotation

    initial_bounds = options.initial_bounds
    if initial_bounds is None:
        initial_bounds = graph.get_shape_geometry(initial_shape).bounds

    if not angles_compatible(page_rotation, scale_axis_rotation):
        log.debug(
            "Shape %s is rotated %.4f against scale axis %.4f; resizing unaligned",
            shape_id,
            page_rotation,
            scale_axis_rotation,
        )
        return _resize_unaligned_shape(
            graph,
            shape_id,
            scale,
            dataclasses.replace(
                options,
                initial_shape=initial_shape,
                initial_bounds=initial_bounds,
                initial_page_transform=page_transform,
                scale_origin=scale_origin,
                scale_axis_rotation=scale_axis_rotation,
            ),
        )

    util = graph.get_shape_util(initial_shape)

    if util.is_aspect_ratio_locked(initial_shape):
        if abs(scale.x()) > abs(scale.y()):
            scale = QPointF(scale.x(), _sign(scale.y()) * abs(scale.x()))
        else:
            scale = QPointF(_sign(scale.x()) * abs(scale.y()), scale.y())

    if util.on_resize is not None and util.can_resize(initial_shape):
        new_page_point = scale_page_point(
            transform_origin(page_transform),
            scale_origin,
            scale,
            scale_axis_rotation,
        )
        new_local_point = graph.get_point_in_parent_space(shape_id, new_page_point)

        # A shape aligned with the selection may still sit 90 degrees off its
        # axes, in which case width and height swap scale factors
        axes_aligned = is_multiple_of(page_rotation - scale_axis_rotation, math.pi)
        scale_x = scale.x() if axes_aligned else scale.y()
        scale_y = scale.y() if axes_aligned else scale.x()

        # Rebuild the starting position in the current parent space in case
        # the parent has moved since the resize began
        initial_page_point = page_transform.map(QPointF(0, 0))
        start = graph.get_point_in_parent_space(shape_id, initial_page_point)

        partial = util.on_resize(
            initial_shape.with_position(start.x(), start.y()),
            ResizeInfo(
                new_point=new_local_point,
                handle=options.drag_handle,
                mode=options.mode,
                scale_x=scale_x,
                scale_y=scale_y,
                initial_bounds=initial_bounds,
                initial_shape=initial_shape,
            ),
        )
        moved = initial_shape.with_position(new_local_point.x(), new_local_point.y())
        return apply_partial(moved, partial)

    # Types without a resize callback are only moved: their centre follows
    # the scale while their dimensions stay put
    initial_page_center = page_transform.map(initial_bounds.center())
    inverse_parent = inverted(graph.get_shape_parent_transform(initial_shape))
    new_page_center = scale_page_point(initial_page_center, scale_origin, scale, scale_axis_rotation)
    delta = inverse_parent.map(new_page_center) - inverse_parent.map(initial_page_center)
    return initial_shape.with_position(initial_shape.x + delta.x(), initial_shape.y + delta.y())


def _resize_unaligned_shape(
    graph: ShapeGraphView,
    shape_id: str,
    scale: QPointF,
    options: ResizeOptions,
) -> Shape:
    """Resize a shape whose rotation is skewed against the scale axis.

    Scaling such a shape independently on the page axes would shear it, so
    it is scaled by a single magnitude (the smaller one, so it never grows
    past the selection box), mirrored if exactly one axis flips, and then
    moved so its centre lands where the real scale puts it.

    Only :func:`get_resized_shape` calls this, and it resolves every snapshot
    field of *options* (initial shape, bounds, page transform, scale origin
    and axis) before doing so.
    """
    initial_shape = options.initial_shape
    initial_bounds = options.initial_bounds
    page_transform = options.initial_page_transform
    scale_origin = options.scale_origin
    scale_axis_rotation = options.scale_axis_rotation
    assert initial_shape is not None
    assert initial_bounds is not None
    assert page_transform is not None
    assert scale_origin is not None
    assert scale_axis_rotation is not None

    if abs(scale.x()) > abs(scale.y()):
        shape_scale = QPointF(_sign(scale.x()) * abs(scale.y()), scale.y())
    else:
        shape_scale = QPointF(scale.x(), _sign(scale.y()) * abs(scale.x()))

    pre_scale_page_center = page_transform.map(initial_bounds.center())

    # Scale about the shape's own centre first; every read comes from the
    # initial snapshot so repeated calls during a drag never compound
    resized_shape = get_resized_shape(
        graph,
        shape_id,
        shape_scale,
        ResizeOptions(
            initial_shape=initial_shape,
            initial_bounds=initial_bounds,
            initial_page_transform=page_transform,
            scale_origin=pre_scale_page_center,
            drag_handle=options.drag_handle,
            mode=options.mode,
        ),
    )

    parent_transform = graph.get_shape_parent_transform(resized_shape)

    # Flipping exactly one axis is a mirror across the scale axis, which
    # turns page rotation r into 2 * axis - r
    if _sign(scale.x()) * _sign(scale.y()) < 0:
        page_rotation = decompose(page_transform).rotation
        mirrored = 2 * scale_axis_rotation - page_rotation
        rotation = clamp_radians(mirrored - rotation_of(parent_transform))
        resized_shape = dataclasses.replace(resized_shape, rotation=rotation)

    post_scale_page_center = scale_page_point(
        pre_scale_page_center,
        scale_origin,
        scale,
        scale_axis_rotation,
    )

    # The store still holds the old record, so compose the new page
    # transform by hand
    new_page_transform: QTransform = (
        local_transform(resized_shape.x, resized_shape.y, resized_shape.rotation) * parent_transform
    )
    geometry = graph.get_shape_util(resized_shape).get_geometry(resized_shape)
    if not geometry.vertices:
        raise ShapeNotFoundError(f"Page bounds of shape {shape_id!r} not found")
    page_bounds: QRectF = box_from_points(map_points(new_page_transform, geometry.vertices))

    page_delta = post_scale_page_center - page_bounds.center()
    post_scale_page_point = transform_origin(new_page_transform) + page_delta
    point = graph.get_point_in_parent_space(shape_id, post_scale_page_point)
    return resized_shape.with_position(point.x(), point.y())
