"""
Message template data transfer objects.
"""
from __future__ import annotations

from typing import Annotated, Iterable, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .values import PropertyValue


class TextToken(BaseModel):
    """Literal text, already unescaped"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str

    def render(self, properties: Mapping[str, PropertyValue]) -> str:
        return self.text


class PropertyToken(BaseModel):
    """A named placeholder such as {Name}, {@Order} or {Elapsed,8:0.00}"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["property"] = "property"
    name: str
    raw_text: str
    format: Optional[str] = None
    alignment: Optional[int] = None
    destructuring: Optional[Literal["@", "$"]] = None

    def render(self, properties: Mapping[str, PropertyValue]) -> str:
        value = properties.get(self.name)
        if value is None:
            return self.raw_text
        text = value.render(self.format)
        if self.alignment is not None:
            width = abs(self.alignment)
            text = text.ljust(width) if self.alignment < 0 else text.rjust(width)
        return text


MessageTemplateToken = Annotated[Union[TextToken, PropertyToken], Field(discriminator="kind")]


class MessageTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    tokens: Tuple[MessageTemplateToken, ...] = ()

    @property
    def property_tokens(self) -> Tuple[PropertyToken, ...]:
        return tuple(t for t in self.tokens if isinstance(t, PropertyToken))

    def render(self, properties: Union[Mapping[str, PropertyValue], Iterable]) -> str:
        if not isinstance(properties, Mapping):
            properties = {p.name: p.value for p in properties}
        return "".join(token.render(properties) for token in self.tokens)


EMPTY_TEMPLATE = MessageTemplate()
