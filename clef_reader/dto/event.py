"""
Event data transfer objects (DTOs) for compact JSON log events.
"""
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Tuple
from pydantic import BaseModel, ConfigDict, Field

from .template import MessageTemplate, EMPTY_TEMPLATE
from .values import LogEventProperty, PropertyValue


class LogEventLevel(str, Enum):
    """Severity levels, least to most severe"""
    VERBOSE = "Verbose"
    DEBUG = "Debug"
    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"
    FATAL = "Fatal"

    @classmethod
    def from_name(cls, name: str) -> Optional["LogEventLevel"]:
        """Case-insensitive lookup by name; None when nothing matches"""
        wanted = name.strip().lower()
        for level in cls:
            if level.value.lower() == wanted:
                return level
        return None


DEFAULT_LEVEL = LogEventLevel.INFORMATION


class TextException(BaseModel):
    """Exception known only by its text, typically a formatted stack trace"""
    model_config = ConfigDict(frozen=True)

    text: str

    def __str__(self) -> str:
        return self.text


class LogEvent(BaseModel):
    """Event data model, representing a single decoded log line"""
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    level: LogEventLevel = DEFAULT_LEVEL
    exception: Optional[TextException] = None
    message_template: MessageTemplate = Field(default=EMPTY_TEMPLATE)
    properties: Tuple[LogEventProperty, ...] = ()
    trace_id: Optional[bytes] = None
    span_id: Optional[bytes] = None

    def get_property(self, name: str) -> Optional[PropertyValue]:
        for prop in self.properties:
            if prop.name == name:
                return prop.value
        return None

    def property_dict(self) -> Dict[str, PropertyValue]:
        return {p.name: p.value for p in self.properties}

    def render_message(self) -> str:
        return self.message_template.render(self.property_dict())

    @property
    def trace_id_hex(self) -> Optional[str]:
        return self.trace_id.hex() if self.trace_id is not None else None

    @property
    def span_id_hex(self) -> Optional[str]:
        return self.span_id.hex() if self.span_id is not None else None
