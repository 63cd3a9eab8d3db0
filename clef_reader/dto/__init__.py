from .event import LogEvent, LogEventLevel, TextException, DEFAULT_LEVEL
from .template import MessageTemplate, MessageTemplateToken, TextToken, PropertyToken, EMPTY_TEMPLATE
from .values import (
    PropertyValue,
    ScalarValue,
    SequenceValue,
    StructureMember,
    StructureValue,
    DictionaryEntry,
    DictionaryValue,
    RenderableValue,
    LogEventProperty,
)

__all__ = [
    "LogEvent",
    "LogEventLevel",
    "TextException",
    "DEFAULT_LEVEL",
    "MessageTemplate",
    "MessageTemplateToken",
    "TextToken",
    "PropertyToken",
    "EMPTY_TEMPLATE",
    "PropertyValue",
    "ScalarValue",
    "SequenceValue",
    "StructureMember",
    "StructureValue",
    "DictionaryEntry",
    "DictionaryValue",
    "RenderableValue",
    "LogEventProperty",
]
