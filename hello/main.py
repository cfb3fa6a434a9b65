"""Hello entry point - configures logging and locale, exits with run()'s status.

Invariants:
    - Logging is configured once, from Settings, before anything else runs
    - The process locale is taken from the environment (setlocale(LC_ALL, ""))
      before the "current" culture is read; an unusable locale falls back to
      the invariant culture
    - The process exit status is exactly the value returned by run()
"""

import locale
import logging
import sys

from hello.config import Settings, get_settings
from hello.infrastructure.observability import setup_logging
from hello.shell.hello_world_app import run

logger = logging.getLogger(__name__)


def configure_locale(settings: Settings) -> Settings:
    """Adopt the environment's locale. Returns settings to run with."""
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error as exc:
        logger.warning(f"Unusable process locale, using invariant culture: {exc}")
        return settings.model_copy(update={"culture": "invariant"})
    return settings


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    settings = configure_locale(settings)
    logger.debug("Hello starting")
    exit_code = run(settings)
    logger.debug("Hello finished", extra={"exit_code": exit_code})
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
