"""ImageShapeUtil — bitmap placeholders that always keep their aspect ratio."""

from __future__ import annotations

from typing import Any

from PyQt6.QtCore import QRectF

from resizekit.config.constants import DEFAULT_IMAGE_HEIGHT, DEFAULT_IMAGE_WIDTH
from resizekit.core.resize_options import ResizeInfo
from resizekit.core.shape import Shape, ShapePartial
from resizekit.shapes.base_util import Geometry, ShapeUtil
from resizekit.shapes.resize_box import resize_box


class ImageShapeUtil(ShapeUtil):
    type = "image"

    def get_default_props(self) -> dict[str, Any]:
        return {"w": DEFAULT_IMAGE_WIDTH, "h": DEFAULT_IMAGE_HEIGHT, "url": ""}

    def get_geometry(self, shape: Shape) -> Geometry:
        rect = QRectF(0, 0, shape.props["w"], shape.props["h"])
        return Geometry([rect.topLeft(), rect.topRight(), rect.bottomRight(), rect.bottomLeft()])

    def is_aspect_ratio_locked(self, shape: Shape) -> bool:
        return True

    def on_resize(self, shape: Shape, info: ResizeInfo) -> ShapePartial:
        return resize_box(shape, info)
