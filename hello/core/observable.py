"""Observable Properties - change-detected, notifiable properties for any host.

Invariants:
    - A notification fires iff the new value is not the old object AND
      (old is None OR hashes differ OR old != new); no-op assignments never notify
    - Order on change: pre_action -> assign -> listeners -> post_action
    - A failing pre_action propagates and the field keeps its old value
    - Listeners run synchronously, in registration order, with (host, property_name)
    - Duplicate registrations are kept; each one fires
    - Single writer: set_property does an unsynchronized read-modify-write-notify,
      callers serialize writes to the same host/property themselves

Design Decisions:
    - BackingField cells instead of name-based attribute lookup: set_property gets
      the field itself, never a string to resolve
    - observable_property descriptor is sugar over set_property for class-level declarations
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

PropertyChangedListener = Callable[[object, str], None]


@dataclass
class BackingField(Generic[T]):
    """Explicit storage cell for one observable property."""
    name: str
    value: T | None = None


def _has_changed(old: Any, new: Any) -> bool:
    if old is new:
        return False
    if old is None:
        return True
    try:
        if hash(old) != hash(new):
            return True
    except TypeError:
        pass  # unhashable: equality decides
    return old != new


class PropertyChangeBase:
    """Host capability: listener registry plus change-detected assignment."""

    def __init__(self) -> None:
        self._property_changed: list[tuple[str | None, PropertyChangedListener]] = []

    def add_property_changed_listener(
        self, listener: PropertyChangedListener, property_name: str | None = None,
    ) -> None:
        """Subscribe to one property, or to every property when property_name is None."""
        self._property_changed.append((property_name, listener))

    def remove_property_changed_listener(
        self, listener: PropertyChangedListener, property_name: str | None = None,
    ) -> None:
        """Remove one matching registration. Unknown listeners are ignored."""
        entry = (property_name, listener)
        if entry in self._property_changed:
            self._property_changed.remove(entry)

    def notify_property_changed(self, property_name: str) -> None:
        for subscribed, listener in list(self._property_changed):
            if subscribed is None or subscribed == property_name:
                listener(self, property_name)

    def set_property(
        self,
        field: BackingField[T],
        value: T,
        pre_action: Callable[[], None] | None = None,
        post_action: Callable[[], None] | None = None,
        property_name: str | None = None,
    ) -> bool:
        """Assign value to field and notify if it changed. Returns whether it changed."""
        if not _has_changed(field.value, value):
            return False
        if pre_action is not None:
            pre_action()
        field.value = value
        self.notify_property_changed(property_name or field.name)
        if post_action is not None:
            post_action()
        return True


class observable_property(Generic[T]):
    """Descriptor declaring a notifying property on a PropertyChangeBase subclass.

    ``validator`` receives every incoming value, before change detection, and
    raises to reject it.
    """

    def __init__(self, validator: Callable[[T], None] | None = None) -> None:
        self._validator = validator
        self._name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    def _field(self, instance: PropertyChangeBase) -> BackingField[T]:
        key = f"_{self._name}_field"
        field = instance.__dict__.get(key)
        if field is None:
            field = BackingField(self._name)
            instance.__dict__[key] = field
        return field

    def __get__(self, instance: PropertyChangeBase | None, owner: type | None = None):
        if instance is None:
            return self
        return self._field(instance).value

    def __set__(self, instance: PropertyChangeBase, value: T) -> None:
        if self._validator is not None:
            self._validator(value)
        instance.set_property(self._field(instance), value)
