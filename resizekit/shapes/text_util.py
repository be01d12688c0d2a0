"""TextShapeUtil — text blocks that scale as a whole or re-wrap to a new width."""

from __future__ import annotations

from typing import Any

from PyQt6.QtCore import QPointF, QRectF

from resizekit.config.constants import DEFAULT_TEXT_HEIGHT, DEFAULT_TEXT_WIDTH, MIN_SHAPE_SIZE
from resizekit.core.geometry import rotate_point
from resizekit.core.resize_options import ResizeHandle, ResizeInfo, ResizeMode
from resizekit.core.shape import Shape, ShapePartial
from resizekit.shapes.base_util import Geometry, ShapeUtil
from resizekit.shapes.resize_box import resize_scaled


class TextShapeUtil(ShapeUtil):
    """A block of text.

    ``w``/``h`` describe the unscaled layout box; the rendered box is that box
    multiplied by ``scale``.
    """

    type = "text"

    def get_default_props(self) -> dict[str, Any]:
        return {
            "text": "",
            "w": DEFAULT_TEXT_WIDTH,
            "h": DEFAULT_TEXT_HEIGHT,
            "scale": 1.0,
            "auto_size": True,
        }

    def get_geometry(self, shape: Shape) -> Geometry:
        scale = shape.props.get("scale", 1.0)
        rect = QRectF(0, 0, shape.props["w"] * scale, shape.props["h"] * scale)
        return Geometry([rect.topLeft(), rect.topRight(), rect.bottomRight(), rect.bottomLeft()])

    def on_resize(self, shape: Shape, info: ResizeInfo) -> ShapePartial:
        if info.mode is ResizeMode.SCALE_SHAPE or info.handle not in (
            ResizeHandle.LEFT,
            ResizeHandle.RIGHT,
        ):
            return resize_scaled(shape, info)

        # Dragging a side edge re-wraps the text instead of scaling it
        next_width = max(MIN_SHAPE_SIZE, abs(info.initial_bounds.width() * info.scale_x))
        point = info.new_point
        if info.scale_x < 0:
            offset = rotate_point(QPointF(next_width, 0), QPointF(), shape.rotation)
            point = point - offset
        return {
            "x": point.x(),
            "y": point.y(),
            "props": {
                "w": next_width / info.initial_shape.props.get("scale", 1.0),
                "auto_size": False,
            },
        }
