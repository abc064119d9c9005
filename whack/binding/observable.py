from __future__ import annotations
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, List

log = logging.getLogger(__name__)

_UNSET = object()


@dataclass(frozen=True)
class PropertyChanged:
    name: str


Listener = Callable[[Any, PropertyChanged], None]


@lru_cache(maxsize=None)
def property_changed_args(name: str) -> PropertyChanged:
    """Shared PropertyChanged instance for `name`."""
    if not name:
        raise ValueError("name cannot be empty")
    return PropertyChanged(name)


class bindable:
    """
    Observable field declared on an Observable subclass:

        class Player(Observable):
            score = bindable(0)

    Assigning a value equal to the current one is a no-op; anything else
    stores the value and notifies subscribers under the attribute's name.
    """

    def __init__(self, default: Any = None):
        self.default = default
        self.name = ""

    def __set_name__(self, owner, name: str) -> None:
        self.name = name
        self._slot = f"_{name}"

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return obj.__dict__.get(self._slot, self.default)

    def __set__(self, obj, value) -> None:
        old = obj.__dict__.get(self._slot, _UNSET)
        if old is _UNSET:
            old = self.default
        if old is None:
            changed = value is not None
        else:
            changed = old != value
        if changed:
            obj.__dict__[self._slot] = value
            obj.raise_property_changed(self.name)


class Observable:
    """
    Base for objects whose `bindable` fields can be observed.

    Subscribers are called with (sender, PropertyChanged) after the field
    has been stored. `after_property_changed` runs after every notification
    attempt, even when nobody is subscribed.
    """

    def __init__(self) -> None:
        self.raise_notifications: bool = True
        self._listeners: List[Listener] = []

    @classmethod
    def bindable_names(cls) -> set[str]:
        names = set()
        for klass in cls.__mro__:
            for attr, value in vars(klass).items():
                if isinstance(value, bindable):
                    names.add(attr)
        return names

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def raise_property_changed(self, name: str) -> None:
        if not self.raise_notifications:
            return
        assert name in self.bindable_names(), \
            f"{name} is not a bindable property of {type(self).__qualname__}"

        args = property_changed_args(name)
        for listener in list(self._listeners):
            listener(self, args)

        self.after_property_changed(name)

    def after_property_changed(self, name: str) -> None:
        """Hook for subclasses; the base implementation does nothing."""
        ...


class ViewModel(Observable):
    """
    Observable with a display name and an explicit teardown hook.
    """

    def __init__(self, display_name: str | None = None) -> None:
        super().__init__()
        self.display_name = display_name or type(self).__qualname__

    def dispose(self) -> None:
        log.debug("Disposing %s", self.display_name)
        self.on_dispose()
        self._listeners.clear()

    def on_dispose(self) -> None:
        """Override to release timers, handlers, etc."""
        ...
