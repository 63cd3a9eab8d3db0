"""
Reserved field names of the compact JSON event format.
"""
from enum import Enum


ESCAPE_MARKER = "@"


class ClefField(str, Enum):
    """Reserved top-level fields; every other field is a user property"""
    TIMESTAMP = "@t"
    MESSAGE_TEMPLATE = "@mt"
    MESSAGE = "@m"
    LEVEL = "@l"
    EXCEPTION = "@x"
    EVENT_ID = "@i"
    RENDERINGS = "@r"
    TRACE_ID = "@tr"
    SPAN_ID = "@sp"


RESERVED_FIELDS = frozenset(f.value for f in ClefField)

# Property name used for the synthetic event id
EVENT_ID_PROPERTY = ClefField.EVENT_ID.value


def is_reserved(name: str) -> bool:
    return name in RESERVED_FIELDS


def escape(name: str) -> str:
    """Escape a user property name so it cannot be read back as a reserved field"""
    if name.startswith(ESCAPE_MARKER):
        return ESCAPE_MARKER + name
    return name


def unescape(name: str) -> str:
    """Strip exactly one leading marker from an escaped property name"""
    if name.startswith(ESCAPE_MARKER * 2):
        return name[1:]
    return name
