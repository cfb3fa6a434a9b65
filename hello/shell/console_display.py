"""Console Display - display consumer that writes its bound text to a stream.

Invariants:
    - text is never None (NullArgumentError); "" renders an empty line
    - attach() resolves the bound property name through retrieve_property_name,
      so cancellation and timeout surface as their domain errors
    - Each actual change of text writes exactly one line, passed through the
      string converter
"""

import sys
from typing import TextIO

from hello.core.culture import Culture, current_culture
from hello.core.errors import NullArgumentError
from hello.core.observable import BackingField, PropertyChangeBase
from hello.core.protocols import HelloWorldServiceLike, ValueConverter
from hello.services.property_name_retrieval import (
    DEFAULT_TIMEOUT_SECONDS, retrieve_property_name,
)

TEXT_PROPERTY = "text"


class ConsoleDisplay(PropertyChangeBase):
    """Renders text line by line on a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None, culture: Culture | None = None):
        super().__init__()
        self._text: BackingField[str] = BackingField(TEXT_PROPERTY)
        self._stream = stream if stream is not None else sys.stdout
        self._culture = culture or current_culture()

    @property
    def text(self) -> str | None:
        return self._text.value

    @text.setter
    def text(self, value: str) -> None:
        if value is None:
            raise NullArgumentError(
                TEXT_PROPERTY, 'Please use "" to display an empty window',
            )
        self.set_property(self._text, value)

    async def _resolve_text_property_name(self) -> str:
        return self._text.name

    async def attach(
        self,
        service: HelloWorldServiceLike,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Bind text changes to the stream through the service's string converter."""
        property_name = await retrieve_property_name(
            self._resolve_text_property_name, TEXT_PROPERTY, timeout_seconds,
        )
        converter = await service.get_string_converter()

        def render(host: object, name: str) -> None:
            self._write(converter)

        self.add_property_changed_listener(render, property_name)

    def _write(self, converter: ValueConverter) -> None:
        line = converter.convert(self.text, str, None, self._culture)
        self._stream.write(f"{line}\n")
        self._stream.flush()
