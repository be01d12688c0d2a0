"""Shared pytest fixtures."""

import os

import pytest
from PyQt6.QtCore import QPointF, QRectF

from resizekit.core.geometry import box_from_points, local_transform, map_points
from resizekit.core.shape import Shape
from resizekit.core.shape_store import ShapeStore

# pytest-qt builds a QApplication for qtbot; no display is needed
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture()
def store() -> ShapeStore:
    """An empty ShapeStore with the default shape types registered."""
    return ShapeStore()


def page_bounds_of(store: ShapeStore, shape: Shape) -> QRectF:
    """Page bounds of a record that may not have been written to the store yet."""
    transform = local_transform(shape.x, shape.y, shape.rotation) * store.get_shape_parent_transform(
        shape
    )
    return box_from_points(map_points(transform, store.get_shape_geometry(shape).vertices))


def page_point_of(store: ShapeStore, shape: Shape, local: QPointF) -> QPointF:
    """Page position of a local point of a (possibly unsaved) record."""
    transform = local_transform(shape.x, shape.y, shape.rotation) * store.get_shape_parent_transform(
        shape
    )
    return transform.map(local)
