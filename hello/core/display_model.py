"""Display Model - the comparable, cloneable value object behind the greeting.

Invariants:
    - display_name is always a str, never None (NullArgumentError / InvalidArgumentError)
    - Equality and hash come from display_name only, using ordinal (str ==) equality
    - Ordering collates display_name under the current culture; None sorts first;
      comparing with any other kind raises InvalidArgumentError
    - clone() returns a new instance with the same display_name
    - set_name() notifies "display_name" only when the value actually changes

Design Decisions:
    - Equality is ordinal while ordering is culture-aware: two distinct names may
      collate equal, they still compare unequal and hash apart
"""

from hello.core.culture import current_culture
from hello.core.errors import InvalidArgumentError, NullArgumentError
from hello.core.observable import BackingField, PropertyChangeBase

DISPLAY_NAME = "display_name"


def _require_name(value: object) -> str:
    if value is None:
        raise NullArgumentError(DISPLAY_NAME)
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{DISPLAY_NAME} must be a str, got {type(value).__name__}",
        )
    return value


class DisplayModel(PropertyChangeBase):
    """Value object wrapping a display string."""

    def __init__(self, display_name: str):
        super().__init__()
        self._display_name: BackingField[str] = BackingField(DISPLAY_NAME)
        self.set_name(display_name)

    @classmethod
    def from_string(cls, value: str) -> "DisplayModel":
        return cls(value)

    @property
    def display_name(self) -> str:
        return self._display_name.value

    def set_name(self, value: str) -> bool:
        """Validate and replace the display name. Returns whether it changed."""
        _require_name(value)
        return self.set_property(self._display_name, value)

    def clone(self) -> "DisplayModel":
        return DisplayModel(self.display_name)

    __copy__ = clone

    def __str__(self) -> str:
        return self.display_name

    def __repr__(self) -> str:
        return f"DisplayModel({self.display_name!r})"

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, DisplayModel):
            return self.display_name == other.display_name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.display_name)

    def compare_to(self, other: object) -> int:
        """Return -1, 0 or 1. None sorts before every instance."""
        if other is None:
            return 1
        if self is other:
            return 0
        if not isinstance(other, DisplayModel):
            raise InvalidArgumentError(
                f"Object must be of type {DisplayModel.__name__}",
            )
        return current_culture().compare(self.display_name, other.display_name)

    def __lt__(self, other: object) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        return self.compare_to(other) >= 0


def compare(left: DisplayModel | None, right: DisplayModel | None) -> int:
    """Total order over optional models: None < any instance, None == None."""
    if left is None:
        return 0 if right is None else -1
    return left.compare_to(right)
