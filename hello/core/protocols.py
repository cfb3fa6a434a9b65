"""Boundary Protocols - contracts between the core and the shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - Capability checks at the converter boundary use these Protocols, never hasattr
    - Implementations are provided by the composition root via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, any object with display_name renders
    - Async in HelloWorldServiceLike: lookups keep their asynchronous contract even
      though the default implementation does no IO
"""

from typing import Protocol, runtime_checkable

from hello.core.culture import Culture
from hello.core.domain_types import TextId
from hello.core.observable import PropertyChangedListener


@runtime_checkable
class HasReadOnlyDisplayName(Protocol):
    """Anything that can be rendered by ModelToStringConverter."""
    @property
    def display_name(self) -> str: ...


class ValueConverter(Protocol):
    """Bidirectional conversion strategy."""
    def convert(
        self, value: object, target_type: type, parameter: object, culture: Culture | None,
    ) -> object: ...
    def convert_back(
        self, value: object, target_type: type, parameter: object, culture: Culture | None,
    ) -> object: ...


class HelloWorldServiceLike(Protocol):
    """Contract for the lookup service - consumed by the shell."""
    async def get_text(self, text_id: TextId = TextId.HELLO_WORLD) -> str: ...
    async def get_string_converter(self) -> ValueConverter: ...
    async def get_model_converter(self) -> ValueConverter: ...


class PropertyHost(Protocol):
    """Contract for objects raising property-changed notifications."""
    def add_property_changed_listener(
        self, listener: PropertyChangedListener, property_name: str | None = None,
    ) -> None: ...
    def remove_property_changed_listener(
        self, listener: PropertyChangedListener, property_name: str | None = None,
    ) -> None: ...
    def notify_property_changed(self, property_name: str) -> None: ...


class DisplayConsumer(PropertyHost, Protocol):
    """Receives the computed display string pushed in by a binding."""
    text: str | None

    async def attach(
        self, service: HelloWorldServiceLike, timeout_seconds: float,
    ) -> None: ...
