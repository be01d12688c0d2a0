"""LineShapeUtil — polylines defined by a list of local points."""

from __future__ import annotations

from typing import Any

from PyQt6.QtCore import QPointF

from resizekit.core.resize_options import ResizeInfo
from resizekit.core.shape import Shape, ShapePartial
from resizekit.shapes.base_util import Geometry, ShapeUtil


class LineShapeUtil(ShapeUtil):
    """An open or closed polyline.

    ``points`` is a list of ``[x, y]`` pairs in the shape's local space.
    """

    type = "line"

    def get_default_props(self) -> dict[str, Any]:
        return {"points": [[0.0, 0.0], [100.0, 0.0]], "closed": False}

    def get_geometry(self, shape: Shape) -> Geometry:
        return Geometry([QPointF(x, y) for x, y in shape.props["points"]])

    def on_resize(self, shape: Shape, info: ResizeInfo) -> ShapePartial:
        sx, sy = info.scale_x, info.scale_y
        return {
            "x": info.new_point.x(),
            "y": info.new_point.y(),
            "props": {"points": [[x * sx, y * sy] for x, y in shape.props["points"]]},
        }
