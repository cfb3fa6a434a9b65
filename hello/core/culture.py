"""Formatting Culture - pluggable text comparison and value formatting.

Invariants:
    - compare() returns exactly -1, 0 or 1, so compare(a, b) == -compare(b, a)
    - The invariant culture compares by code point; the current culture collates
      with the process locale (locale.strxfrm)
    - current_culture() is context-local (ContextVar): tasks never see another
      task's override

Design Decisions:
    - Culture carries callables instead of calling setlocale: setlocale is process-global
"""

import locale
from collections.abc import Callable
from contextvars import ContextVar
from dataclasses import dataclass
from decimal import Decimal
from typing import Any


def _identity(value: str) -> str:
    return value


def _format_plain(value: object) -> str:
    return str(value)


def _format_locale(value: object) -> str:
    if isinstance(value, (float, Decimal)):
        return locale.str(float(value))
    return str(value)


@dataclass(frozen=True)
class Culture:
    """A named pair of collation and formatting rules."""
    name: str
    collation_key: Callable[[str], Any] = _identity
    value_formatter: Callable[[object], str] = _format_plain

    @classmethod
    def invariant(cls) -> "Culture":
        return cls("invariant")

    @classmethod
    def current(cls) -> "Culture":
        """Culture backed by the process locale (LC_COLLATE / LC_NUMERIC)."""
        name = locale.setlocale(locale.LC_COLLATE)
        return cls(name, locale.strxfrm, _format_locale)

    def compare(self, left: str, right: str) -> int:
        left_key, right_key = self.collation_key(left), self.collation_key(right)
        return (left_key > right_key) - (left_key < right_key)

    def format_value(self, value: object) -> str:
        if isinstance(value, str):
            return value
        return self.value_formatter(value)


_current: ContextVar[Culture | None] = ContextVar("hello_current_culture", default=None)


def current_culture() -> Culture:
    """Return the culture set for this context, falling back to the process locale."""
    culture = _current.get()
    return culture if culture is not None else Culture.current()


def set_current_culture(culture: Culture | None):
    """Override the culture for this context. Returns a token for reset_current_culture."""
    return _current.set(culture)


def reset_current_culture(token) -> None:
    _current.reset(token)


def culture_from_name(name: str) -> Culture:
    """Map a configured culture name to a Culture."""
    if name == "invariant":
        return Culture.invariant()
    if name == "current":
        return Culture.current()
    raise ValueError(f"Unknown culture: {name!r}")
