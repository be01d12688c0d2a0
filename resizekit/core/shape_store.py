"""ShapeStore — in-memory shape hierarchy implementing ShapeGraphView."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtCore import QObject, QPointF, QRectF, pyqtSignal
from PyQt6.QtGui import QTransform

from resizekit.core.errors import ReadOnlyViolation, ShapeNotFoundError
from resizekit.core.geometry import box_from_points, inverted, local_transform, map_points
from resizekit.core.shape import Shape
from resizekit.core.shape_graph import ShapeGraphView
from resizekit.shapes.base_util import Geometry, ShapeUtil
from resizekit.shapes.geo_util import GeoShapeUtil
from resizekit.shapes.group_util import GroupShapeUtil
from resizekit.shapes.image_util import ImageShapeUtil
from resizekit.shapes.line_util import LineShapeUtil
from resizekit.shapes.text_util import TextShapeUtil

log = logging.getLogger(__name__)

DEFAULT_SHAPE_UTILS: list[type[ShapeUtil]] = [
    GeoShapeUtil,
    ImageShapeUtil,
    LineShapeUtil,
    TextShapeUtil,
    GroupShapeUtil,
]


def _shape_id(shape: str | Shape) -> str:
    return shape if isinstance(shape, str) else shape.id


class ShapeStore(QObject, ShapeGraphView):
    """Owns shape records keyed by id and answers page-space queries.

    Shapes are stored flat; ``parent_id`` links a shape to its container.
    Page transforms are composed on demand from the parent chain and never
    cached.

    Signals
    -------
    shapes_changed(list)
        Emitted with the list of added or updated shapes.
    shapes_removed(list)
        Emitted with the ids of removed shapes.
    read_only_changed(bool)
    """

    shapes_changed = pyqtSignal(object)
    shapes_removed = pyqtSignal(object)
    read_only_changed = pyqtSignal(bool)

    def __init__(
        self,
        utils: list[type[ShapeUtil]] | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._shapes: dict[str, Shape] = {}
        self._utils: dict[str, ShapeUtil] = {}
        self._read_only: bool = False
        for util_class in DEFAULT_SHAPE_UTILS if utils is None else utils:
            self.register_util(util_class)

    # --- read-only flag ---

    @property
    def is_read_only(self) -> bool:
        return self._read_only

    @property
    def read_only(self) -> bool:
        return self._read_only

    @read_only.setter
    def read_only(self, value: bool) -> None:
        if value != self._read_only:
            self._read_only = value
            self.read_only_changed.emit(value)

    # --- registry ---

    def register_util(self, util_class: type[ShapeUtil]) -> ShapeUtil:
        """Instantiate *util_class* for this store and register it by type name."""
        util = util_class(self)
        self._utils[util.type] = util
        return util

    def get_shape_util(self, shape: str | Shape) -> ShapeUtil:
        record = shape if isinstance(shape, Shape) else self.get_shape(shape)
        if record is None:
            raise ShapeNotFoundError(f"Shape {shape!r} not found")
        util = self._utils.get(record.type)
        if util is None:
            raise ShapeNotFoundError(f"No util registered for shape type {record.type!r}")
        return util

    # --- queries ---

    @property
    def shapes(self) -> list[Shape]:
        return list(self._shapes.values())

    @property
    def count(self) -> int:
        return len(self._shapes)

    def get_shape(self, shape: str | Shape) -> Shape | None:
        return self._shapes.get(_shape_id(shape))

    def get_children(self, shape: str | Shape) -> list[Shape]:
        parent_id = _shape_id(shape)
        return [s for s in self._shapes.values() if s.parent_id == parent_id]

    def get_shape_geometry(self, shape: str | Shape) -> Geometry:
        # A record is measured as given so callers can measure unsaved states
        record = shape if isinstance(shape, Shape) else self.get_shape(shape)
        if record is None:
            raise ShapeNotFoundError(f"Shape {shape!r} not found")
        return self.get_shape_util(record).get_geometry(record)

    def get_shape_page_transform(self, shape: str | Shape) -> QTransform | None:
        record = self.get_shape(shape)
        if record is None:
            return None
        transform = local_transform(record.x, record.y, record.rotation)
        if record.parent_id is None:
            return transform
        parent_transform = self.get_shape_page_transform(record.parent_id)
        if parent_transform is None:
            log.warning("Shape %s is orphaned (parent %s is missing)", record.id, record.parent_id)
            return None
        return transform * parent_transform

    def get_shape_parent_transform(self, shape: str | Shape) -> QTransform:
        record = shape if isinstance(shape, Shape) else self.get_shape(shape)
        if record is None:
            raise ShapeNotFoundError(f"Shape {shape!r} not found")
        if record.parent_id is None:
            return QTransform()
        parent_transform = self.get_shape_page_transform(record.parent_id)
        if parent_transform is None:
            raise ShapeNotFoundError(f"Parent {record.parent_id!r} of shape {record.id!r} not found")
        return parent_transform

    def get_shape_page_bounds(self, shape: str | Shape) -> QRectF | None:
        transform = self.get_shape_page_transform(shape)
        if transform is None:
            return None
        geometry = self.get_shape_geometry(_shape_id(shape))
        return box_from_points(map_points(transform, geometry.vertices))

    def get_point_in_parent_space(self, shape: str | Shape, point: QPointF) -> QPointF:
        record = self.get_shape(shape)
        if record is None:
            raise ShapeNotFoundError(f"Shape {shape!r} not found")
        if record.parent_id is None:
            return QPointF(point)
        return inverted(self.get_shape_parent_transform(record)).map(point)

    # --- mutations ---

    def create_shape(self, shape_type: str, **fields: Any) -> Shape:
        """Create, add and return a shape of *shape_type* with its default props.

        Keyword arguments set record fields; ``props`` entries override the
        defaults key by key.
        """
        util = self._utils.get(shape_type)
        if util is None:
            raise ShapeNotFoundError(f"No util registered for shape type {shape_type!r}")
        props = util.get_default_props()
        props.update(fields.pop("props", {}))
        shape = Shape(type=shape_type, props=props, **fields)
        self.add_shape(shape)
        return shape

    def add_shape(self, shape: Shape) -> None:
        self._check_writable()
        self._shapes[shape.id] = shape
        self.shapes_changed.emit([shape])

    def update_shapes(self, shapes: list[Shape]) -> None:
        """Replace the stored records of *shapes* in one step."""
        self._check_writable()
        for shape in shapes:
            if shape.id not in self._shapes:
                raise ShapeNotFoundError(f"Shape {shape.id!r} not found")
        for shape in shapes:
            self._shapes[shape.id] = shape
        if shapes:
            self.shapes_changed.emit(list(shapes))

    def remove_shape(self, shape: str | Shape) -> list[str]:
        """Remove *shape* and all its descendants. Returns the removed ids."""
        self._check_writable()
        root_id = _shape_id(shape)
        if root_id not in self._shapes:
            raise ShapeNotFoundError(f"Shape {root_id!r} not found")
        removed: list[str] = []
        pending = [root_id]
        while pending:
            current = pending.pop()
            removed.append(current)
            pending.extend(child.id for child in self.get_children(current))
        for shape_id in removed:
            del self._shapes[shape_id]
        self.shapes_removed.emit(removed)
        return removed

    def _check_writable(self) -> None:
        if self._read_only:
            raise ReadOnlyViolation("Cannot modify shapes in read-only mode")
