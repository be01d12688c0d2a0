"""GroupShapeUtil — a container whose outline is the union of its children."""

from __future__ import annotations

from PyQt6.QtCore import QPointF

from resizekit.core.geometry import local_transform, map_points
from resizekit.core.shape import Shape
from resizekit.shapes.base_util import Geometry, ShapeUtil


class GroupShapeUtil(ShapeUtil):
    """Groups have no resize callback of their own.

    Resizing a group only moves it; its children are resized separately by
    the caller and follow the group because their positions are relative.
    """

    type = "group"

    def get_geometry(self, shape: Shape) -> Geometry:
        vertices: list[QPointF] = []
        for child in self.graph.get_children(shape):
            child_geometry = self.graph.get_shape_geometry(child)
            transform = local_transform(child.x, child.y, child.rotation)
            vertices.extend(map_points(transform, child_geometry.vertices))
        return Geometry(vertices)
