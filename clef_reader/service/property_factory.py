"""
Conversion of decoded JSON values into the tagged property value model.
"""
import json
import re
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from ..dto.values import (
    DictionaryEntry,
    DictionaryValue,
    LogEventProperty,
    PropertyValue,
    RenderableValue,
    ScalarValue,
    SequenceValue,
    StructureMember,
    StructureValue,
)
from .renderings import Rendering, NO_RENDERINGS


TYPE_TAG_PROPERTY = "$type"
DICTIONARY_PROPERTY = "$dict"
INVALID_NAME_SUBSTITUTE = "(unnamed)"

_SCALAR_TYPES = (bool, int, float, str, datetime)
JSON_NUMBER_RE = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?")


def create_property(name: str, value: Any, renderings: Sequence[Rendering] = NO_RENDERINGS) -> LogEventProperty:
    return LogEventProperty(name=name or INVALID_NAME_SUBSTITUTE, value=create_property_value(value, renderings))


def create_property_value(value: Any, renderings: Sequence[Rendering] = NO_RENDERINGS) -> PropertyValue:
    """
    Convert a JSON value (as produced by json.loads) into a PropertyValue.

    Args:
        value: None, bool, int, float, str, datetime, list or dict
        renderings: precomputed renderings for this property; when any are
            given the result is wrapped in a RenderableValue

    Returns:
        PropertyValue: the converted value
    """
    converted = _convert(value)
    if renderings:
        return RenderableValue(value=converted, renderings=tuple((r.format, r.text) for r in renderings))
    return converted


def _convert(value: Any) -> PropertyValue:
    if value is None or isinstance(value, _SCALAR_TYPES):
        return ScalarValue(value=value)
    if isinstance(value, (list, tuple)):
        return SequenceValue(elements=tuple(_convert(v) for v in value))
    if isinstance(value, dict):
        dictionary = _try_dictionary(value)
        if dictionary is not None:
            return dictionary
        return _structure(value)
    raise TypeError(f"Unsupported JSON value type: {type(value).__name__}")


def _structure(obj: Dict[str, Any]) -> StructureValue:
    type_tag = obj.get(TYPE_TAG_PROPERTY)
    if not isinstance(type_tag, str):
        type_tag = None

    members = tuple(
        StructureMember(name=name or INVALID_NAME_SUBSTITUTE, value=_convert(v))
        for name, v in obj.items()
        if not (type_tag is not None and name == TYPE_TAG_PROPERTY)
    )
    return StructureValue(type_tag=type_tag, properties=members)


def _try_dictionary(obj: Dict[str, Any]) -> Optional[DictionaryValue]:
    if len(obj) != 1 or DICTIONARY_PROPERTY not in obj:
        return None
    entries = obj[DICTIONARY_PROPERTY]
    if not isinstance(entries, dict):
        return None
    return DictionaryValue(elements=tuple(
        DictionaryEntry(key=ScalarValue(value=_parse_key(k)), value=_convert(v))
        for k, v in entries.items()
    ))


def _parse_key(key: str) -> Any:
    """Recover numeric, boolean and null keys that JSON forced into strings"""
    if key in ("true", "false", "null") or JSON_NUMBER_RE.fullmatch(key):
        return json.loads(key)
    return key

