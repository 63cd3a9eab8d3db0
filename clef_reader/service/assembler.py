"""
Assembly of a single LogEvent from one decoded JSON object.
"""
import re
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

from dateutil import parser as dateutil_parser

from ..dto.event import LogEvent, LogEventLevel, TextException, DEFAULT_LEVEL
from ..dto.template import EMPTY_TEMPLATE
from ..dto.values import LogEventProperty, ScalarValue
from ..errors import RequiredFieldMissing, UnsupportedFieldFormat
from .fields import ClefField, EVENT_ID_PROPERTY, is_reserved, unescape
from .property_factory import create_property
from .renderings import NO_RENDERINGS, correlate_renderings, renderings_for
from .template_parser import DEFAULT_PARSER, escape_text


TRACE_ID_RE = re.compile(r"[0-9a-fA-F]{32}")
SPAN_ID_RE = re.compile(r"[0-9a-fA-F]{16}")
MAX_EVENT_ID = 2 ** 32 - 1


def assemble_event(obj: Dict[str, Any], line_number: int = 1) -> LogEvent:
    """
    Build a LogEvent from a decoded compact JSON object.

    Args:
        obj: The object decoded from one line
        line_number: Line the object came from, used only in error messages

    Returns:
        LogEvent: The assembled, immutable event
    """
    timestamp = _required_timestamp(obj, line_number)

    template_text = _optional_string(obj, ClefField.MESSAGE_TEMPLATE, line_number)
    if template_text is None:
        message = _optional_string(obj, ClefField.MESSAGE, line_number)
        if message is not None:
            template_text = escape_text(message)

    level = DEFAULT_LEVEL
    level_name = _optional_string(obj, ClefField.LEVEL, line_number)
    if level_name is not None:
        level = LogEventLevel.from_name(level_name)
        if level is None:
            raise UnsupportedFieldFormat(ClefField.LEVEL.value, line_number, f"Unknown level `{level_name}`.")

    exception = None
    exception_text = _optional_string(obj, ClefField.EXCEPTION, line_number)
    if exception_text is not None:
        exception = TextException(text=exception_text)

    trace_id = _optional_hex_id(obj, ClefField.TRACE_ID, TRACE_ID_RE, line_number)
    span_id = _optional_hex_id(obj, ClefField.SPAN_ID, SPAN_ID_RE, line_number)

    template = DEFAULT_PARSER.parse(template_text) if template_text is not None else EMPTY_TEMPLATE

    renderings = NO_RENDERINGS
    if ClefField.RENDERINGS.value in obj:
        raw = obj[ClefField.RENDERINGS.value]
        if not isinstance(raw, list):
            raise UnsupportedFieldFormat(ClefField.RENDERINGS.value, line_number, "Expected an array.")
        try:
            renderings = correlate_renderings(template, raw)
        except TypeError as e:
            raise UnsupportedFieldFormat(ClefField.RENDERINGS.value, line_number, str(e)) from e

    properties: List[LogEventProperty] = []
    for field, value in obj.items():
        if is_reserved(field):
            continue
        name = unescape(field)
        properties.append(create_property(name, value, renderings_for(name, renderings)))

    event_id = _optional_event_id(obj, line_number)
    if event_id is not None:
        properties.append(LogEventProperty(name=EVENT_ID_PROPERTY, value=ScalarValue(value=event_id)))

    return LogEvent(
        timestamp=timestamp,
        level=level,
        exception=exception,
        message_template=template,
        properties=tuple(properties),
        trace_id=trace_id,
        span_id=span_id,
    )


def _optional_string(obj: Dict[str, Any], field: ClefField, line_number: int) -> Optional[str]:
    value = obj.get(field.value)
    if value is None:
        return None
    if not isinstance(value, str):
        raise UnsupportedFieldFormat(field.value, line_number)
    return value


def _required_timestamp(obj: Dict[str, Any], line_number: int) -> datetime:
    field = ClefField.TIMESTAMP.value
    value = obj.get(field)
    if value is None:
        raise RequiredFieldMissing(field, line_number)

    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.astimezone()
    if not isinstance(value, str):
        raise UnsupportedFieldFormat(field, line_number)

    for parse in _TIMESTAMP_PARSERS:
        try:
            parsed = parse(value)
        except (ValueError, OverflowError, OSError):
            continue
        if parsed is not None:
            return parsed
    raise UnsupportedFieldFormat(field, line_number, f"Unrecognized timestamp `{value}`.")


def _parse_offset_timestamp(text: str) -> Optional[datetime]:
    parsed = datetime.fromisoformat(text)
    return parsed if parsed.tzinfo is not None else None


def _parse_local_timestamp(text: str) -> Optional[datetime]:
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        return None
    return parsed.astimezone()


def _parse_permissive_timestamp(text: str) -> Optional[datetime]:
    parsed = dateutil_parser.parse(text, default=_DEFAULT_DATES[0])
    # dateutil fills missing date parts from the default; a full date parses the same under both
    if dateutil_parser.parse(text, default=_DEFAULT_DATES[1]) != parsed:
        return None
    return parsed if parsed.tzinfo is not None else parsed.astimezone()


_DEFAULT_DATES = (datetime(1901, 1, 1), datetime(1902, 2, 2))


_TIMESTAMP_PARSERS: Tuple[Callable[[str], Optional[datetime]], ...] = (
    _parse_offset_timestamp,
    _parse_local_timestamp,
    _parse_permissive_timestamp,
)


def _optional_hex_id(obj: Dict[str, Any], field: ClefField, pattern: re.Pattern, line_number: int) -> Optional[bytes]:
    text = _optional_string(obj, field, line_number)
    if text is None:
        return None
    if not pattern.fullmatch(text):
        raise UnsupportedFieldFormat(field.value, line_number, f"`{text}` is not a valid identifier.")
    return bytes.fromhex(text)


def _optional_event_id(obj: Dict[str, Any], line_number: int):
    field = ClefField.EVENT_ID.value
    value = obj.get(field)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_EVENT_ID:
        return value
    raise UnsupportedFieldFormat(field, line_number)
