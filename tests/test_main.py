"""Entry point - process locale adoption and exit statuses.

Tests cover:
    - configure_locale() adopts the environment locale (setlocale(LC_ALL, ""))
    - An unusable locale falls back to the invariant culture
    - The "current" culture follows the process locale's collation
    - main() exits 1 for a cancelled retrieval and 70 for a timeout
"""

import asyncio
import locale

import pytest

from hello import main as entry
from hello.config import Settings
from hello.core.culture import Culture, culture_from_name
from hello.core.domain_types import HelloWorldReturnCode
from hello.shell.console_display import ConsoleDisplay
from hello.shell.hello_world_app import UNHANDLED_ERROR_EXIT_CODE


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.fixture
def setlocale_calls(monkeypatch):
    calls = []

    def fake_setlocale(category, value=None):
        calls.append((category, value))
        return "xx_XX.UTF-8"

    monkeypatch.setattr(locale, "setlocale", fake_setlocale)
    return calls


# --- configure_locale ---------------------------------------------------------


def test_configure_locale_adopts_environment(setlocale_calls):
    settings = _settings(culture="current")
    assert entry.configure_locale(settings) is settings
    assert setlocale_calls == [(locale.LC_ALL, "")]


def test_configure_locale_falls_back_to_invariant(monkeypatch):
    def broken_setlocale(category, value=None):
        raise locale.Error("unsupported locale setting")

    monkeypatch.setattr(locale, "setlocale", broken_setlocale)
    settings = entry.configure_locale(_settings(culture="current"))
    assert settings.culture == "invariant"
    assert culture_from_name(settings.culture) == Culture.invariant()


def test_current_culture_follows_process_locale(monkeypatch, setlocale_calls):
    monkeypatch.setattr(locale, "strxfrm", lambda text: text[::-1])
    entry.configure_locale(_settings(culture="current"))

    culture = Culture.current()
    assert culture.name == "xx_XX.UTF-8"
    # Reversed-string collation orders "ab" after "ba"; code points do the opposite
    assert culture.compare("ab", "ba") == 1
    assert Culture.invariant().compare("ab", "ba") == -1


# --- main() exit statuses -----------------------------------------------------


def _run_main(monkeypatch, settings: Settings) -> int:
    monkeypatch.setattr(entry, "get_settings", lambda: settings)
    monkeypatch.setattr(entry, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(locale, "setlocale", lambda category, value=None: "C")
    with pytest.raises(SystemExit) as exc_info:
        entry.main()
    return exc_info.value.code


def test_main_exit_status_for_cancelled_retrieval(monkeypatch):
    async def cancelled(self):
        raise asyncio.CancelledError()

    monkeypatch.setattr(ConsoleDisplay, "_resolve_text_property_name", cancelled)
    exit_code = _run_main(monkeypatch, _settings(culture="invariant"))
    assert exit_code == int(HelloWorldReturnCode.PROPERTY_NAME_RETRIEVAL_CANCELLED)


def test_main_exit_status_for_timeout_differs_from_cancelled(monkeypatch):
    async def slow(self):
        await asyncio.sleep(60)
        return "text"

    monkeypatch.setattr(ConsoleDisplay, "_resolve_text_property_name", slow)
    exit_code = _run_main(
        monkeypatch, _settings(culture="invariant", property_name_timeout_seconds=0.01),
    )
    assert exit_code == UNHANDLED_ERROR_EXIT_CODE
    assert exit_code != int(HelloWorldReturnCode.PROPERTY_NAME_RETRIEVAL_CANCELLED)
