"""GeoShapeUtil — rectangle and ellipse box shapes."""

from __future__ import annotations

from typing import Any

from PyQt6.QtCore import QRectF
from PyQt6.QtGui import QPainterPath

from resizekit.config.constants import (
    DEFAULT_GEO_HEIGHT,
    DEFAULT_GEO_KIND,
    DEFAULT_GEO_WIDTH,
    ELLIPSE_SEGMENTS,
)
from resizekit.core.resize_options import ResizeInfo
from resizekit.core.shape import Shape, ShapePartial
from resizekit.shapes.base_util import Geometry, ShapeUtil
from resizekit.shapes.resize_box import resize_box


class GeoShapeUtil(ShapeUtil):
    """A ``w`` x ``h`` box drawn as a rectangle or an ellipse."""

    type = "geo"

    def get_default_props(self) -> dict[str, Any]:
        return {"w": DEFAULT_GEO_WIDTH, "h": DEFAULT_GEO_HEIGHT, "geo": DEFAULT_GEO_KIND}

    def get_geometry(self, shape: Shape) -> Geometry:
        rect = QRectF(0, 0, shape.props["w"], shape.props["h"])
        if shape.props.get("geo") == "ellipse":
            path = QPainterPath()
            path.addEllipse(rect)
            step = 1.0 / ELLIPSE_SEGMENTS
            return Geometry([path.pointAtPercent(i * step) for i in range(ELLIPSE_SEGMENTS)])
        return Geometry([rect.topLeft(), rect.topRight(), rect.bottomRight(), rect.bottomLeft()])

    def on_resize(self, shape: Shape, info: ResizeInfo) -> ShapePartial:
        return resize_box(shape, info)

