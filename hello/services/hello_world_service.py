"""Hello World Service - async lookup of canonical texts and shared converters.

Invariants:
    - The text registry is read-only after construction (MappingProxyType)
    - Converter instances are created once and handed out by reference
    - get_text() raises TextNotFoundError for a key missing from the registry
    - No retries: every failure surfaces to the caller

Design Decisions:
    - Instances are built by create_hello_world_service() and injected by the
      composition root; there is no module-level service singleton
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from hello.core.converters import ModelToStringConverter, StringToStringConverter
from hello.core.domain_types import TextId
from hello.core.errors import TextNotFoundError
from hello.core.protocols import ValueConverter

logger = logging.getLogger(__name__)

HELLO_WORLD_TEXT = "Hello, World!"

DEFAULT_TEXTS: Mapping[TextId, str] = MappingProxyType({
    TextId.HELLO_WORLD: HELLO_WORLD_TEXT,
})


class HelloWorldService:
    """Resolves texts and conversion strategies by key."""

    def __init__(
        self,
        texts: Mapping[TextId, str],
        string_converter: ValueConverter,
        model_converter: ValueConverter,
    ):
        self._texts = MappingProxyType(dict(texts))
        self._string_converter = string_converter
        self._model_converter = model_converter

    async def get_text(self, text_id: TextId = TextId.HELLO_WORLD) -> str:
        if text_id not in self._texts:
            logger.error("Text lookup failed", extra={"text_id": str(text_id)})
            raise TextNotFoundError(text_id)
        return self._texts[text_id]

    async def get_string_converter(self) -> ValueConverter:
        return self._string_converter

    async def get_model_converter(self) -> ValueConverter:
        return self._model_converter


def create_hello_world_service() -> HelloWorldService:
    """Build the default service with the canonical greeting and fresh converters."""
    service = HelloWorldService(
        DEFAULT_TEXTS, StringToStringConverter(), ModelToStringConverter(),
    )
    logger.debug("HelloWorldService initialized", extra={"text_count": len(DEFAULT_TEXTS)})
    return service
