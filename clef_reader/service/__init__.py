from .assembler import assemble_event
from .fields import ClefField, escape, unescape
from .property_factory import create_property, create_property_value
from .reader import LogEventReader, read_events
from .renderings import Rendering, correlate_renderings
from .template_parser import MessageTemplateParser, escape_text

__all__ = [
    'assemble_event',
    'ClefField',
    'escape',
    'unescape',
    'create_property',
    'create_property_value',
    'LogEventReader',
    'read_events',
    'Rendering',
    'correlate_renderings',
    'MessageTemplateParser',
    'escape_text',
]
