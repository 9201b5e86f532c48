"""A small widget toolkit: widget tree, frame/button/toplevel/entry classes, picking, bindings, damage tracking and drawing geometry."""

__version__ = "0.1.0"

__all__ = [
    "bindings",
    "button",
    "damage",
    "entry",
    "frame",
    "geometry",
    "picking",
    "textedit",
    "toplevel",
    "widget",
]