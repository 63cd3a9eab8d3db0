"""
Property value data transfer objects.

Tagged value model for arbitrary event property data:
- ScalarValue: null, bool, number, string or datetime
- SequenceValue: ordered list of values
- StructureValue: optional type tag plus ordered named members
- DictionaryValue: scalar keys mapped to values
- RenderableValue: any of the above plus precomputed display text per format
"""
from __future__ import annotations

import json
from datetime import datetime
from typing import Annotated, Any, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


def _format_scalar(value: Any, fmt: Optional[str]) -> str:
    if value is None:
        return "null"
    if isinstance(value, str):
        return value if fmt == "l" else json.dumps(value, ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    if fmt:
        try:
            return format(value, fmt)
        except (TypeError, ValueError):
            pass
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


class ScalarValue(_FrozenModel):
    kind: Literal["scalar"] = "scalar"
    value: Any = None

    def render(self, format: Optional[str] = None) -> str:
        return _format_scalar(self.value, format)

    def to_plain(self) -> Any:
        return self.value


class SequenceValue(_FrozenModel):
    kind: Literal["sequence"] = "sequence"
    elements: Tuple[PropertyValue, ...] = ()

    def render(self, format: Optional[str] = None) -> str:
        return "[" + ", ".join(e.render(format) for e in self.elements) + "]"

    def to_plain(self) -> Any:
        return [e.to_plain() for e in self.elements]


class StructureMember(_FrozenModel):
    name: str
    value: PropertyValue


class StructureValue(_FrozenModel):
    kind: Literal["structure"] = "structure"
    type_tag: Optional[str] = None
    properties: Tuple[StructureMember, ...] = ()

    def get(self, name: str) -> Optional[PropertyValue]:
        for member in self.properties:
            if member.name == name:
                return member.value
        return None

    def render(self, format: Optional[str] = None) -> str:
        body = ", ".join(f"{m.name}: {m.value.render(format)}" for m in self.properties)
        prefix = f"{self.type_tag} " if self.type_tag else ""
        return f"{prefix}{{ {body} }}" if body else f"{prefix}{{}}"

    def to_plain(self) -> Any:
        plain: Dict[str, Any] = {m.name: m.value.to_plain() for m in self.properties}
        if self.type_tag is not None:
            plain = {"$type": self.type_tag, **plain}
        return plain


class DictionaryEntry(_FrozenModel):
    key: ScalarValue
    value: PropertyValue


class DictionaryValue(_FrozenModel):
    kind: Literal["dictionary"] = "dictionary"
    elements: Tuple[DictionaryEntry, ...] = ()

    def get(self, key: Any) -> Optional[PropertyValue]:
        for entry in self.elements:
            if entry.key.value == key and type(entry.key.value) is type(key):
                return entry.value
        return None

    def render(self, format: Optional[str] = None) -> str:
        items = ", ".join(f"({e.key.render(format)}: {e.value.render(format)})" for e in self.elements)
        return f"[{items}]"

    def to_plain(self) -> Any:
        return {e.key.value: e.value.to_plain() for e in self.elements}


class RenderableValue(_FrozenModel):
    """A value carried together with the display text the producer computed for it"""
    kind: Literal["renderable"] = "renderable"
    value: PropertyValue
    renderings: Tuple[Tuple[str, str], ...] = ()

    def rendering(self, format: str) -> Optional[str]:
        """Precomputed text for a format, or None"""
        for fmt, text in self.renderings:
            if fmt == format:
                return text
        return None

    def render(self, format: Optional[str] = None) -> str:
        text = self.rendering(format) if format is not None else None
        if text is not None:
            return text
        return self.value.render(format)

    def to_plain(self) -> Any:
        return self.value.to_plain()


PropertyValue = Annotated[
    Union[ScalarValue, SequenceValue, StructureValue, DictionaryValue, RenderableValue],
    Field(discriminator="kind"),
]


class LogEventProperty(_FrozenModel):
    name: str
    value: PropertyValue


for _model in (SequenceValue, StructureMember, StructureValue, DictionaryEntry,
               DictionaryValue, RenderableValue, LogEventProperty):
    _model.model_rebuild()
