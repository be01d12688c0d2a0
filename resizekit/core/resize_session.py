"""ResizeSession — applies engine results to a store for the length of one drag."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QPointF
from PyQt6.QtGui import QTransform

from resizekit.core.errors import ShapeNotFoundError
from resizekit.core.resize import ScaleLike, get_resized_shape
from resizekit.core.resize_options import ResizeHandle, ResizeMode, ResizeOptions
from resizekit.core.shape import Shape
from resizekit.core.shape_store import ShapeStore

log = logging.getLogger(__name__)


class ResizeSession:
    """Resize shapes relative to their state when the session was created.

    Every shape's record, bounds, page transform and scale origin are captured
    once at construction. Each :meth:`update` recomputes all results from that
    snapshot and writes them with a single ``update_shapes`` call, so frames
    never compound and the store emits one change per frame.
    """

    def __init__(
        self,
        store: ShapeStore,
        shape_ids: list[str],
        *,
        scale_origin: QPointF | None = None,
        scale_axis_rotation: float | None = None,
        drag_handle: ResizeHandle = ResizeHandle.BOTTOM_RIGHT,
        mode: ResizeMode = ResizeMode.SCALE_SHAPE,
    ) -> None:
        self._store = store
        self._shape_ids = list(shape_ids)
        self._scale_origin = QPointF(scale_origin) if scale_origin is not None else None
        self._scale_axis_rotation = scale_axis_rotation
        self._drag_handle = drag_handle
        self._mode = mode
        self._snapshots = [self._capture(shape_id) for shape_id in self._shape_ids]
        log.debug("Resize session started for %d shape(s)", len(self._shape_ids))

    def _capture(self, shape_id: str) -> ResizeOptions:
        shape = self._store.get_shape(shape_id)
        page_transform = self._store.get_shape_page_transform(shape_id)
        page_bounds = self._store.get_shape_page_bounds(shape_id)
        if shape is None or page_transform is None or page_bounds is None:
            raise ShapeNotFoundError(f"Shape {shape_id!r} not found")
        return ResizeOptions(
            initial_shape=shape,
            initial_bounds=self._store.get_shape_geometry(shape).bounds,
            initial_page_transform=QTransform(page_transform),
            scale_origin=self._scale_origin if self._scale_origin is not None else page_bounds.center(),
            scale_axis_rotation=self._scale_axis_rotation,
            drag_handle=self._drag_handle,
            mode=self._mode,
        )

    @property
    def shape_ids(self) -> list[str]:
        return list(self._shape_ids)

    @property
    def initial_shapes(self) -> list[Shape]:
        shapes = [options.initial_shape for options in self._snapshots]
        return [shape for shape in shapes if shape is not None]

    def update(self, scale: ScaleLike) -> list[Shape]:
        """Resize every shape by *scale* from the snapshot and store the results."""
        resized = [
            get_resized_shape(self._store, shape_id, scale, options)
            for shape_id, options in zip(self._shape_ids, self._snapshots)
        ]
        self._store.update_shapes(resized)
        return resized

    def cancel(self) -> None:
        """Put every shape back to its captured record."""
        self._store.update_shapes(self.initial_shapes)
