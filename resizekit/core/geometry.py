"""Geometry helpers — angle arithmetic and affine decomposition on Qt value types.

All angles are radians. Transforms are ``QTransform`` instances restricted to
translation and rotation; points are ``QPointF`` and boxes ``QRectF``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from PyQt6.QtCore import QPointF, QRectF
from PyQt6.QtGui import QPolygonF, QTransform

from resizekit.config.constants import ANGLE_EPSILON

PI2 = math.pi * 2
HALF_PI = math.pi / 2


def approximately(a: float, b: float, precision: float = ANGLE_EPSILON) -> bool:
    """Return True if *a* and *b* differ by no more than *precision*."""
    return abs(a - b) <= precision


def clamp_radians(r: float) -> float:
    """Wrap an angle into ``[0, 2π)``."""
    return (r % PI2 + PI2) % PI2


def is_multiple_of(angle: float, period: float, precision: float = ANGLE_EPSILON) -> bool:
    """Return True if *angle* is (within *precision*) an integer multiple of *period*.

    Values just below a full period count as a multiple too.
    """
    rest = angle % period
    return approximately(rest, 0, precision) or approximately(rest, period, precision)


def angles_compatible(a: float, b: float) -> bool:
    """Return True if two rotations differ by a multiple of 90 degrees."""
    return a == b or is_multiple_of(a - b, HALF_PI)


def rotation_of(transform: QTransform) -> float:
    """Return the rotation encoded in *transform*, in ``[0, 2π)``."""
    a, b = transform.m11(), transform.m12()
    c, d = transform.m21(), transform.m22()
    if a != 0 or c != 0:
        hypot_ac = math.hypot(a, c)
        rotation = math.acos(max(-1.0, min(1.0, a / hypot_ac))) * (-1 if c > 0 else 1)
    elif b != 0 or d != 0:
        hypot_bd = math.hypot(b, d)
        rotation = HALF_PI + math.acos(max(-1.0, min(1.0, b / hypot_bd))) * (-1 if d > 0 else 1)
    else:
        rotation = 0.0
    return clamp_radians(rotation)


@dataclass(frozen=True)
class Decomposition:
    """Translation, scale and rotation components of an affine transform."""

    x: float
    y: float
    scale_x: float
    scale_y: float
    rotation: float


def decompose(transform: QTransform) -> Decomposition:
    """Split *transform* into translation, scale and rotation."""
    a, b = transform.m11(), transform.m12()
    c, d = transform.m21(), transform.m22()
    if a != 0 or b != 0:
        r = math.hypot(a, b)
        angle = math.acos(max(-1.0, min(1.0, a / r)))
        rotation = angle if b > 0 else -angle
        scale_x = r
        scale_y = (a * d - b * c) / r
    elif c != 0 or d != 0:
        s = math.hypot(c, d)
        if d > 0:
            rotation = HALF_PI - math.acos(max(-1.0, min(1.0, -c / s)))
        else:
            rotation = HALF_PI + math.acos(max(-1.0, min(1.0, c / s)))
        scale_x = (a * d - b * c) / s
        scale_y = s
    else:
        scale_x = scale_y = rotation = 0.0
    return Decomposition(
        x=transform.dx(),
        y=transform.dy(),
        scale_x=scale_x,
        scale_y=scale_y,
        rotation=clamp_radians(rotation),
    )


def local_transform(x: float, y: float, rotation: float) -> QTransform:
    """Return the transform placing a shape at (x, y) with *rotation*."""
    return QTransform().translate(x, y).rotateRadians(rotation)


def transform_origin(transform: QTransform) -> QPointF:
    """Return the point the local origin maps to."""
    return QPointF(transform.dx(), transform.dy())


def inverted(transform: QTransform) -> QTransform:
    """Return the inverse of a rigid transform."""
    inverse, invertible = transform.inverted()
    if not invertible:
        raise ValueError("transform is not invertible")
    return inverse


def rotate_point(point: QPointF, origin: QPointF, angle: float) -> QPointF:
    """Rotate *point* around *origin* by *angle*."""
    if angle == 0:
        return QPointF(point)
    s = math.sin(angle)
    c = math.cos(angle)
    px = point.x() - origin.x()
    py = point.y() - origin.y()
    return QPointF(px * c - py * s + origin.x(), px * s + py * c + origin.y())


def box_from_points(points: list[QPointF]) -> QRectF:
    """Return the axis-aligned bounding box of *points*."""
    return QPolygonF(points).boundingRect()


def map_points(transform: QTransform, points: list[QPointF]) -> list[QPointF]:
    """Map every point through *transform*."""
    return [transform.map(p) for p in points]
