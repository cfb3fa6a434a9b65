"""Conversion Strategies - stateless, validated transforms used by display bindings.

Invariants:
    - Converters hold no state; one instance is shared by every caller
    - A non-None parameter is always rejected with UnsupportedOperationError,
      before any other check
    - culture=None means current_culture()
    - ModelToStringConverter.convert_back(convert(m)) has m's display_name

Design Decisions:
    - Capability checks through HasReadOnlyDisplayName (runtime Protocol) and an
      explicit tuple of string-convertible types
"""

from decimal import Decimal

from hello.core.culture import Culture, current_culture
from hello.core.display_model import DisplayModel
from hello.core.errors import InvalidArgumentError, UnsupportedOperationError
from hello.core.protocols import HasReadOnlyDisplayName

STRING_CONVERTIBLE_TYPES: tuple[type, ...] = (str, int, float, Decimal, bool)

_NO_PARAMETERS = "This converter does not accept parameters"


def _reject_parameter(parameter: object) -> None:
    if parameter is not None:
        raise UnsupportedOperationError(_NO_PARAMETERS)


def _accepts(target_type: object, source_type: type) -> bool:
    """True if a source_type value can be assigned to target_type."""
    if target_type is object:
        return True
    if not isinstance(target_type, type):
        return False
    try:
        return issubclass(source_type, target_type)
    except TypeError:  # Protocols with data members refuse issubclass()
        return False


class StringToStringConverter:
    """Coerces a value into target_type, symmetrically in both directions."""

    def convert(
        self,
        value: object,
        target_type: type,
        parameter: object = None,
        culture: Culture | None = None,
    ) -> object:
        _reject_parameter(parameter)
        if value is None:
            return None
        if not callable(target_type):
            raise InvalidArgumentError(f"Cannot convert {value} to {target_type!r}")
        culture = culture or current_culture()
        try:
            if target_type is str:
                result = culture.format_value(value)
            elif isinstance(target_type, type) and isinstance(value, target_type):
                result = value
            else:
                result = target_type(value)
        except (TypeError, ValueError, ArithmeticError) as exc:
            raise InvalidArgumentError(
                f"Cannot convert {value} to {_type_name(target_type)}",
            ) from exc
        if result is None:
            raise InvalidArgumentError(
                f"Cannot convert {value} to {_type_name(target_type)}",
            )
        return result

    def convert_back(
        self,
        value: object,
        target_type: type,
        parameter: object = None,
        culture: Culture | None = None,
    ) -> object:
        return self.convert(value, target_type, parameter, culture)


class ModelToStringConverter:
    """Renders a display-name provider as text, and wraps text back into a DisplayModel."""

    def convert(
        self,
        value: object,
        target_type: type = str,
        parameter: object = None,
        culture: Culture | None = None,
    ) -> str:
        _reject_parameter(parameter)
        if not isinstance(value, HasReadOnlyDisplayName):
            raise UnsupportedOperationError(
                f"Only {HasReadOnlyDisplayName.__name__} is supported",
            )
        if not _accepts(target_type, str):
            raise UnsupportedOperationError(
                f"Can only convert {HasReadOnlyDisplayName.__name__} to str",
            )
        return (culture or current_culture()).format_value(value.display_name)

    def convert_back(
        self,
        value: object,
        target_type: type = DisplayModel,
        parameter: object = None,
        culture: Culture | None = None,
    ) -> DisplayModel:
        _reject_parameter(parameter)
        if not isinstance(value, STRING_CONVERTIBLE_TYPES):
            raise UnsupportedOperationError(
                "Only str, int, float, Decimal and bool values are supported",
            )
        if target_type is not HasReadOnlyDisplayName and not _accepts(target_type, DisplayModel):
            raise UnsupportedOperationError(
                f"Can only convert str to {HasReadOnlyDisplayName.__name__}",
            )
        return DisplayModel((culture or current_culture()).format_value(value))


def _type_name(target_type: object) -> str:
    return getattr(target_type, "__qualname__", repr(target_type))
