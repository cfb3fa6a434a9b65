"""Domain Types - closed enumerations shared across the codebase.

Invariants:
    - TextId is the only key type accepted by the lookup service
    - HelloWorldReturnCode values are the process exit statuses (0, 1, 2)
    - All valid states encoded as Enums - no raw string or int matching

Design Decisions:
    - IntEnum for return codes: int(code) is the exit status with no mapping table
"""

from enum import Enum, IntEnum


class TextId(str, Enum):
    """Keys of the canonical text registry."""
    HELLO_WORLD = "hello_world"


class HelloWorldReturnCode(IntEnum):
    """Startup outcomes; the value is the process exit status."""
    SUCCESS = 0
    PROPERTY_NAME_RETRIEVAL_CANCELLED = 1
    NO_WINDOW_CLASS = 2
