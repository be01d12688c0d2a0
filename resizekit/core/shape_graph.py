"""ShapeGraphView — the read-only capability the resize engine reads shapes through."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QPointF, QRectF
from PyQt6.QtGui import QTransform

if TYPE_CHECKING:
    from resizekit.core.shape import Shape
    from resizekit.shapes.base_util import Geometry, ShapeUtil


class ShapeGraphView:
    """Read-only view of a shape hierarchy.

    Methods accept either a shape id or a shape record. Concrete hosts
    (see :class:`~resizekit.core.shape_store.ShapeStore`) override every method.
    """

    @property
    def is_read_only(self) -> bool:
        raise NotImplementedError

    def get_shape(self, shape: str | Shape) -> Shape | None:
        """Return the current record for *shape*, or None if it does not exist."""
        raise NotImplementedError

    def get_children(self, shape: str | Shape) -> list[Shape]:
        """Return the direct children of *shape* in insertion order."""
        raise NotImplementedError

    def get_shape_util(self, shape: str | Shape) -> ShapeUtil:
        """Return the util registered for the shape's type."""
        raise NotImplementedError

    def get_shape_geometry(self, shape: str | Shape) -> Geometry:
        """Return the shape's local-space geometry."""
        raise NotImplementedError

    def get_shape_page_transform(self, shape: str | Shape) -> QTransform | None:
        """Return the transform from the shape's local space to page space."""
        raise NotImplementedError

    def get_shape_parent_transform(self, shape: str | Shape) -> QTransform:
        """Return the page transform of the shape's parent (identity on the page)."""
        raise NotImplementedError

    def get_shape_page_bounds(self, shape: str | Shape) -> QRectF | None:
        """Return the page-space bounding box of the shape's geometry."""
        raise NotImplementedError

    def get_point_in_parent_space(self, shape: str | Shape, point: QPointF) -> QPointF:
        """Convert a page-space *point* into the shape's parent space."""
        raise NotImplementedError
