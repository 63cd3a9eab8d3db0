"""
CLEF Reader - reads newline-delimited compact JSON log events
"""

__version__ = "1.0.0"
__author__ = "CLEF Reader Team"

from .dto import (
    LogEvent,
    LogEventLevel,
    TextException,
    MessageTemplate,
    TextToken,
    PropertyToken,
    ScalarValue,
    SequenceValue,
    StructureValue,
    DictionaryValue,
    RenderableValue,
    LogEventProperty,
)
from .errors import (
    ClefReaderError,
    StreamFormatError,
    RequiredFieldMissing,
    UnsupportedFieldFormat,
    ArgumentError,
)
from .service import (
    LogEventReader,
    read_events,
    assemble_event,
    create_property_value,
    ClefField,
    MessageTemplateParser,
)

__all__ = [
    'LogEvent',
    'LogEventLevel',
    'TextException',
    'MessageTemplate',
    'TextToken',
    'PropertyToken',
    'ScalarValue',
    'SequenceValue',
    'StructureValue',
    'DictionaryValue',
    'RenderableValue',
    'LogEventProperty',
    'ClefReaderError',
    'StreamFormatError',
    'RequiredFieldMissing',
    'UnsupportedFieldFormat',
    'ArgumentError',
    'LogEventReader',
    'read_events',
    'assemble_event',
    'create_property_value',
    'ClefField',
    'MessageTemplateParser',
]
