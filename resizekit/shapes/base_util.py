"""ShapeUtil — per-type capabilities the resize engine depends on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from PyQt6.QtCore import QPointF, QRectF

from resizekit.core.geometry import box_from_points

if TYPE_CHECKING:
    from resizekit.core.resize_options import ResizeInfo
    from resizekit.core.shape import Shape, ShapePartial
    from resizekit.core.shape_graph import ShapeGraphView

ResizeHandler = Callable[["Shape", "ResizeInfo"], "ShapePartial"]


@dataclass(frozen=True)
class Geometry:
    """Local-space outline of a shape."""

    vertices: list[QPointF] = field(default_factory=list)

    @property
    def bounds(self) -> QRectF:
        return box_from_points(self.vertices)

    @property
    def center(self) -> QPointF:
        return self.bounds.center()


class ShapeUtil(ABC):
    """Base class for shape type definitions.

    Subclasses set :attr:`type`, describe their geometry and may define an
    ``on_resize(shape, info)`` method returning a partial. Types that leave
    ``on_resize`` as ``None`` are only repositioned when resized.
    """

    type: ClassVar[str] = ""

    on_resize: ResizeHandler | None = None

    def __init__(self, graph: ShapeGraphView) -> None:
        self._graph = graph

    @property
    def graph(self) -> ShapeGraphView:
        return self._graph

    def get_default_props(self) -> dict[str, Any]:
        """Return the props a freshly created shape of this type starts with."""
        return {}

    @abstractmethod
    def get_geometry(self, shape: Shape) -> Geometry:
        """Return the shape's outline in its own local space."""

    def is_aspect_ratio_locked(self, shape: Shape) -> bool:
        return False

    def can_resize(self, shape: Shape) -> bool:
        return True
