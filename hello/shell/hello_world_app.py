"""Hello World App - composition root wiring service, model and display.

Invariants:
    - Long-lived instances (service, converters, culture) are built here and injected
    - model is never None (NullArgumentError)
    - Display consumers come from DISPLAY_CONSUMERS only; unknown or empty names
      raise HelloWorldError(NO_WINDOW_CLASS)
    - run() returns HelloWorldReturnCode values: 0 success, 1 property-name
      retrieval cancelled, 2 no window class; every other error is logged with
      exc_info and returns UNHANDLED_ERROR_EXIT_CODE (70)

Design Decisions:
    - Explicit dict for consumers: adding one requires editing this module
    - Binding is a property-changed listener on "model" pushing through the
      model converter into display.text
"""

import asyncio
import logging
from typing import TextIO

from hello.config import Settings, get_settings
from hello.core.culture import (
    Culture, culture_from_name, current_culture, reset_current_culture, set_current_culture,
)
from hello.core.display_model import DisplayModel
from hello.core.domain_types import HelloWorldReturnCode
from hello.core.errors import HelloError, HelloWorldError, NullArgumentError
from hello.core.observable import PropertyChangeBase, observable_property
from hello.core.protocols import DisplayConsumer, HelloWorldServiceLike
from hello.services.hello_world_service import create_hello_world_service
from hello.services.property_name_retrieval import DEFAULT_TIMEOUT_SECONDS
from hello.shell.console_display import ConsoleDisplay

logger = logging.getLogger(__name__)

MODEL_PROPERTY = "model"

# Exit status for failures outside HelloWorldReturnCode (sysexits EX_SOFTWARE)
UNHANDLED_ERROR_EXIT_CODE = 70

DISPLAY_CONSUMERS: dict[str, type[ConsoleDisplay]] = {
    "console": ConsoleDisplay,
}


def _require_model(value: DisplayModel | None) -> None:
    if value is None:
        raise NullArgumentError(MODEL_PROPERTY)


def resolve_display_class(name: str | None) -> type[ConsoleDisplay]:
    """Look up a registered display consumer class by name."""
    display_class = DISPLAY_CONSUMERS.get((name or "").strip().lower())
    if display_class is None:
        raise HelloWorldError(None, HelloWorldReturnCode.NO_WINDOW_CLASS)
    return display_class


class HelloWorldApp(PropertyChangeBase):
    """Owns the greeting model and binds it to a display consumer."""

    model = observable_property(validator=_require_model)

    def __init__(
        self,
        service: HelloWorldServiceLike,
        culture: Culture | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        super().__init__()
        self._service = service
        self._culture = culture or current_culture()
        self._timeout_seconds = timeout_seconds

    async def start(self, display: DisplayConsumer) -> None:
        await display.attach(self._service, self._timeout_seconds)
        self.model = DisplayModel.from_string(await self._service.get_text())
        converter = await self._service.get_model_converter()

        def push(host: object, name: str) -> None:
            display.text = converter.convert(self.model, str, None, self._culture)

        self.add_property_changed_listener(push, MODEL_PROPERTY)
        push(self, MODEL_PROPERTY)


async def _run(settings: Settings, stream: TextIO | None) -> int:
    token = set_current_culture(culture_from_name(settings.culture))
    try:
        display_class = resolve_display_class(settings.display_consumer)
        app = HelloWorldApp(
            create_hello_world_service(),
            timeout_seconds=settings.property_name_timeout_seconds,
        )
        await app.start(display_class(stream))
    except HelloWorldError as exc:
        logger.error(
            exc.message,
            extra={"error_code": exc.code.name, "exit_code": exc.exit_code},
        )
        return exc.exit_code
    except HelloError as exc:
        logger.error(
            f"HelloError: {exc.message}",
            extra={"error_code": exc.code, "exit_code": UNHANDLED_ERROR_EXIT_CODE},
            exc_info=True,
        )
        return UNHANDLED_ERROR_EXIT_CODE
    except Exception as exc:
        logger.error(
            f"Unhandled exception: {exc}",
            extra={"error_code": "INTERNAL_ERROR", "exit_code": UNHANDLED_ERROR_EXIT_CODE},
            exc_info=True,
        )
        return UNHANDLED_ERROR_EXIT_CODE
    finally:
        reset_current_culture(token)
    return int(HelloWorldReturnCode.SUCCESS)


def run(settings: Settings | None = None, stream: TextIO | None = None) -> int:
    """Run the greeting once and return the process exit status."""
    return asyncio.run(_run(settings or get_settings(), stream))
