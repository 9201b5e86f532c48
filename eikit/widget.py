"""Widgets, the widget class registry and the toolkit that owns them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Sequence

from eikit.bindings import TagBindings
from eikit.damage import InvalidatedRects
from eikit.geometry import Canvas, Color, Point, Rect, Size
from eikit.picking import PickRegistry, decode_pick_pixel, pick_color

Destructor = Callable[["Widget"], None]


class GeometryManager(Protocol):
    """What a geometry manager offers to the widgets it places."""

    def run(self, widget: "Widget") -> None: ...

    def release(self, widget: "Widget") -> None: ...


@dataclass
class GeometryParams:
    """Placement state of a widget managed by a geometry manager."""

    manager: GeometryManager
    reconfigurable: bool = False
    width: int = 0
    height: int = 0


class Widget:
    """Base of every widget: hierarchy, picking identity and geometry state."""

    class_name: Optional[str] = None

    def __init__(self, toolkit: "Toolkit", parent: Optional["Widget"] = None,
                 user_data: Any = None, destructor: Optional[Destructor] = None) -> None:
        self.toolkit = toolkit
        self.pick_id = toolkit.picks.add(self)
        self.pick_color: Optional[Color] = pick_color(self.pick_id)
        self.user_data = user_data
        self.destructor = destructor
        self.parent = parent
        self._children: list[Widget] = []
        if parent is not None:
            parent._children.append(self)
        self.geom_params: Optional[GeometryParams] = None
        self.requested_size = Size()
        self.screen_location = Rect()
        self._content_rect: Optional[Rect] = None
        self.callback: Optional[Callable[..., Any]] = None

    # Hierarchy

    def children(self) -> list["Widget"]:
        """The children of this widget, in creation order."""
        return list(self._children)

    @property
    def first_child(self) -> Optional["Widget"]:
        return self._children[0] if self._children else None

    @property
    def last_child(self) -> Optional["Widget"]:
        return self._children[-1] if self._children else None

    @property
    def next_sibling(self) -> Optional["Widget"]:
        if self.parent is None:
            return None
        siblings = self.parent._children
        position = siblings.index(self)
        return siblings[position + 1] if position + 1 < len(siblings) else None

    # Life cycle

    def destroy(self) -> None:
        """Destroy this widget and all its descendants."""
        if self.parent is not None and self in self.parent._children:
            self.parent._children.remove(self)
        for child in list(self._children):
            child.destroy()
        self._children.clear()
        self.toolkit.invalidate_rect(self.screen_location)
        if self.geom_params is not None:
            self.geom_params.manager.release(self)
            self.geom_params = None
        self.pick_color = None
        self.callback = None
        self._content_rect = None
        if self.destructor is not None:
            self.destructor(self)
        if self.toolkit.entry_focus is self:
            self.toolkit.entry_focus = None

    def is_displayed(self) -> bool:
        """Whether a geometry manager currently manages this widget."""
        return self.geom_params is not None

    # Geometry

    def set_requested_size(self, size: Size) -> None:
        """Change the requested size; a reconfigurable placement is recomputed."""
        self.requested_size = Size(size.width, size.height)
        params = self.geom_params
        if params is not None and params.reconfigurable:
            params.width = size.width
            params.height = size.height
            params.manager.run(self)

    @property
    def content_rect(self) -> Rect:
        """Area where children are placed; the screen location unless set."""
        return self._content_rect if self._content_rect is not None else self.screen_location

    def set_content_rect(self, rect: Rect) -> None:
        """Give the widget a content area distinct from its screen location."""
        self._content_rect = rect

    def geometry_notify(self) -> None:
        """Called when the screen location changed; content follows it."""
        self._content_rect = None

    def draw(self, canvas: Canvas, pick_canvas: Canvas, clipper: Optional[Rect]) -> None:
        """Bring the placement up to date before drawing."""
        if self.geom_params is not None:
            self.geom_params.manager.run(self)


class WidgetClassRegistry:
    """Widget classes known by name, the most recently registered first."""

    def __init__(self) -> None:
        self._classes: list[type[Widget]] = []

    def register(self, widgetclass: type[Widget]) -> None:
        """Make ``widgetclass`` available under its ``class_name``."""
        if not (isinstance(widgetclass, type) and issubclass(widgetclass, Widget)):
            raise TypeError("a widget class must derive from Widget")
        if not isinstance(widgetclass.class_name, str) or not widgetclass.class_name:
            raise ValueError("a widget class needs a non-empty class_name")
        self._classes.insert(0, widgetclass)

    def unregister(self, name: str) -> None:
        """Remove the most recently registered class called ``name``."""
        for i, widgetclass in enumerate(self._classes):
            if widgetclass.class_name == name:
                del self._classes[i]
                return
        raise KeyError(name)

    def from_name(self, name: str) -> Optional[type[Widget]]:
        """The class registered under ``name``, or None."""
        return next((c for c in self._classes if c.class_name == name), None)


class Toolkit:
    """Shared state of an application: classes, picking, damage and bindings."""

    def __init__(self) -> None:
        self.classes = WidgetClassRegistry()
        self.picks = PickRegistry()
        self.invalidated = InvalidatedRects()
        self.bindings = TagBindings()
        self.entry_focus: Optional[Widget] = None

    def invalidate_rect(self, rect: Rect) -> None:
        """Mark ``rect`` for redrawing."""
        self.invalidated.add(rect)

    def create_widget(self, class_name: str, parent: Optional[Widget] = None,
                      user_data: Any = None,
                      destructor: Optional[Destructor] = None) -> Widget:
        """Create a widget of the registered class ``class_name``."""
        widgetclass = self.classes.from_name(class_name)
        if widgetclass is None:
            raise KeyError(f"unknown widget class: {class_name!r}")
        return widgetclass(self, parent, user_data, destructor)

    def pick(self, where: Point, buffer: Sequence[int], width: int,
             channel_indices: Sequence[int]) -> Widget:
        """The widget whose pick colour is at ``where`` in the pick buffer."""
        pixel = buffer[where.x + where.y * width]
        return self.picks.get(decode_pick_pixel(pixel, channel_indices))