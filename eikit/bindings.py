"""Registry of event callbacks bound to a tag."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterator


@dataclass(frozen=True)
class TagBinding:
    """A callback bound to every widget carrying ``tag`` for one event type."""

    callback: Callable[..., Any]
    tag: str
    eventtype: Hashable
    user_param: Any = None

    def matches(self, callback: Callable[..., Any], tag: str, eventtype: Hashable,
                user_param: Any) -> bool:
        return (self.tag == tag
                and self.eventtype == eventtype
                and self.callback == callback
                and self.user_param is user_param)


class TagBindings:
    """Tag bindings, most recently added first."""

    def __init__(self) -> None:
        self._bindings: list[TagBinding] = []

    def add(self, callback: Callable[..., Any], tag: str, eventtype: Hashable,
            user_param: Any = None) -> TagBinding:
        """Bind ``callback`` to ``tag`` for ``eventtype``."""
        binding = TagBinding(callback, tag, eventtype, user_param)
        self._bindings.insert(0, binding)
        return binding

    def remove(self, callback: Callable[..., Any], tag: str, eventtype: Hashable,
               user_param: Any = None) -> None:
        """Remove the first binding equal to the one given."""
        for i, binding in enumerate(self._bindings):
            if binding.matches(callback, tag, eventtype, user_param):
                del self._bindings[i]
                return
        raise ValueError(f"no binding for tag {tag!r} and event {eventtype!r}")

    def clear(self) -> None:
        """Remove every binding."""
        self._bindings.clear()

    def __iter__(self) -> Iterator[TagBinding]:
        return iter(list(self._bindings))

    def __len__(self) -> int:
        return len(self._bindings)