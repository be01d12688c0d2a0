"""Tests for ShapeStore — page transforms, parent chains and mutations."""

from __future__ import annotations

import logging
import math

import pytest
from PyQt6.QtCore import QPointF
from pytestqt.qtbot import QtBot

from resizekit.core.errors import IllegalStateError, ReadOnlyViolation, ShapeNotFoundError
from resizekit.core.shape import Shape
from resizekit.core.shape_store import ShapeStore
from resizekit.shapes.geo_util import GeoShapeUtil


def test_default_utils_registered(store: ShapeStore) -> None:
    for shape_type in ("geo", "image", "line", "text", "group"):
        shape = store.create_shape(shape_type)
        assert store.get_shape_util(shape).type == shape_type


def test_create_shape_merges_default_props(store: ShapeStore) -> None:
    shape = store.create_shape("geo", x=5, props={"w": 40})
    assert shape.props == {"w": 40, "h": 100.0, "geo": "rectangle"}
    assert store.get_shape(shape.id) is shape


def test_unknown_type_raises(store: ShapeStore) -> None:
    with pytest.raises(ShapeNotFoundError):
        store.create_shape("video")
    shape = Shape(type="video")
    store.add_shape(shape)
    with pytest.raises(ShapeNotFoundError):
        store.get_shape_util(shape)


def test_custom_util_list() -> None:
    store = ShapeStore(utils=[GeoShapeUtil])
    store.create_shape("geo")
    with pytest.raises(ShapeNotFoundError):
        store.create_shape("line")


def test_page_transform_of_page_child(store: ShapeStore) -> None:
    shape = store.create_shape("geo", x=10, y=20, rotation=math.pi / 2)
    transform = store.get_shape_page_transform(shape)
    assert transform is not None
    point = transform.map(QPointF(5, 0))
    assert point.x() == pytest.approx(10)
    assert point.y() == pytest.approx(25)


def test_page_transform_composes_parent_chain(store: ShapeStore) -> None:
    group = store.create_shape("group", x=100, y=0, rotation=math.pi / 2)
    child = store.create_shape("geo", x=10, y=0, parent_id=group.id)
    transform = store.get_shape_page_transform(child)
    assert transform is not None
    origin = transform.map(QPointF(0, 0))
    assert origin.x() == pytest.approx(100)
    assert origin.y() == pytest.approx(10)


def test_parent_transform(store: ShapeStore) -> None:
    group = store.create_shape("group", x=40, y=30)
    child = store.create_shape("geo", parent_id=group.id)
    on_page = store.create_shape("geo")
    assert store.get_shape_parent_transform(child).map(QPointF(0, 0)) == QPointF(40, 30)
    assert store.get_shape_parent_transform(on_page).isIdentity()


def test_point_in_parent_space(store: ShapeStore) -> None:
    group = store.create_shape("group", x=100, y=0, rotation=math.pi / 2)
    child = store.create_shape("geo", x=10, y=0, parent_id=group.id)
    point = store.get_point_in_parent_space(child, QPointF(100, 10))
    assert point.x() == pytest.approx(10)
    assert point.y() == pytest.approx(0)


def test_page_bounds_of_rotated_shape(store: ShapeStore) -> None:
    shape = store.create_shape("geo", x=100, y=0, rotation=math.pi / 2, props={"w": 40, "h": 10})
    bounds = store.get_shape_page_bounds(shape)
    assert bounds is not None
    assert bounds.x() == pytest.approx(90)
    assert bounds.y() == pytest.approx(0)
    assert bounds.width() == pytest.approx(10)
    assert bounds.height() == pytest.approx(40)


def test_group_geometry_is_union_of_children(store: ShapeStore) -> None:
    group = store.create_shape("group")
    store.create_shape("geo", parent_id=group.id, props={"w": 10, "h": 10})
    store.create_shape("geo", x=50, y=20, parent_id=group.id, props={"w": 10, "h": 10})
    bounds = store.get_shape_geometry(group).bounds
    assert (bounds.x(), bounds.y(), bounds.width(), bounds.height()) == pytest.approx(
        (0, 0, 60, 30)
    )


def test_orphaned_shape_has_no_page_transform(
    store: ShapeStore, caplog: pytest.LogCaptureFixture
) -> None:
    orphan = store.create_shape("geo", parent_id="missing")
    with caplog.at_level(logging.WARNING, logger="resizekit.core.shape_store"):
        assert store.get_shape_page_transform(orphan) is None
    assert "orphaned" in caplog.text
    assert store.get_shape_page_bounds(orphan) is None
    with pytest.raises(ShapeNotFoundError):
        store.get_shape_parent_transform(orphan)


def test_missing_shape_queries(store: ShapeStore) -> None:
    assert store.get_shape("nope") is None
    assert store.get_shape_page_transform("nope") is None
    with pytest.raises(ShapeNotFoundError):
        store.get_point_in_parent_space("nope", QPointF())
    with pytest.raises(ShapeNotFoundError):
        store.get_shape_geometry("nope")


# --- mutations ---


def test_update_shapes_replaces_records(store: ShapeStore, qtbot: QtBot) -> None:
    shape = store.create_shape("geo")
    moved = shape.with_position(30, 40)
    with qtbot.waitSignal(store.shapes_changed) as blocker:
        store.update_shapes([moved])
    assert blocker.args == [[moved]]
    assert store.get_shape(shape.id) == moved


def test_update_unknown_shape_raises(store: ShapeStore) -> None:
    with pytest.raises(ShapeNotFoundError):
        store.update_shapes([Shape(type="geo")])


def test_remove_shape_removes_descendants(store: ShapeStore) -> None:
    outer = store.create_shape("group")
    inner = store.create_shape("group", parent_id=outer.id)
    leaf = store.create_shape("geo", parent_id=inner.id)
    other = store.create_shape("geo")
    removed = store.remove_shape(outer)
    assert set(removed) == {outer.id, inner.id, leaf.id}
    assert store.shapes == [other]


def test_read_only_blocks_mutations(store: ShapeStore, qtbot: QtBot) -> None:
    shape = store.create_shape("geo")
    with qtbot.waitSignal(store.read_only_changed) as blocker:
        store.read_only = True
    assert blocker.args == [True]
    assert store.is_read_only
    with pytest.raises(ReadOnlyViolation):
        store.update_shapes([shape.with_position(1, 1)])
    with pytest.raises(IllegalStateError):
        store.remove_shape(shape)
    with pytest.raises(ReadOnlyViolation):
        store.create_shape("geo")
