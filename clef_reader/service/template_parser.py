"""
Message template parsing.

Templates are literal text with named placeholders:
  "User {UserId} logged in from {@Client} after {Elapsed:0.00} ms"

Grammar:
  - "{{" and "}}" are literal braces
  - "{" [@|$] name ["," alignment] [":" format] "}" is a property token
  - anything that does not parse as a property token stays literal text
"""
import re
from typing import List, Tuple

from ..dto.template import MessageTemplate, MessageTemplateToken, PropertyToken, TextToken


PROPERTY_TOKEN_RE = re.compile(
    r"""
    (?P<hint>[@$])?
    (?P<name>[A-Za-z0-9_]+)
    (?:,(?P<alignment>-?\d+))?
    (?::(?P<format>[^{}]+))?
    """,
    re.VERBOSE,
)


def escape_text(text: str) -> str:
    """Escape plain text so every brace in it is read back as a literal"""
    return text.replace("{", "{{").replace("}", "}}")


class MessageTemplateParser:
    """Stateless parser; a single instance can be shared freely"""

    def parse(self, template: str) -> MessageTemplate:
        tokens: List[MessageTemplateToken] = []
        pos = 0
        end = len(template)
        while pos < end:
            text, pos = self._parse_text(template, pos)
            if text:
                tokens.append(TextToken(text=text))
            if pos >= end:
                break
            token, pos = self._parse_property_token(template, pos)
            tokens.append(token)
        return MessageTemplate(text=template, tokens=tuple(tokens))

    @staticmethod
    def _parse_text(template: str, pos: int) -> Tuple[str, int]:
        chars = []
        end = len(template)
        while pos < end:
            ch = template[pos]
            if ch == "{":
                if pos + 1 < end and template[pos + 1] == "{":
                    chars.append("{")
                    pos += 2
                    continue
                break
            if ch == "}" and pos + 1 < end and template[pos + 1] == "}":
                chars.append("}")
                pos += 2
                continue
            chars.append(ch)
            pos += 1
        return "".join(chars), pos

    @staticmethod
    def _parse_property_token(template: str, start: int) -> Tuple[MessageTemplateToken, int]:
        pos = start + 1
        end = len(template)
        while pos < end and template[pos] not in "{}":
            pos += 1

        if pos == end:
            return TextToken(text=template[start:]), end
        if template[pos] == "{":
            # a new token opens before this one closes
            return TextToken(text=template[start:pos]), pos

        raw = template[start:pos + 1]
        match = PROPERTY_TOKEN_RE.fullmatch(template[start + 1:pos])
        if not match:
            return TextToken(text=raw), pos + 1

        alignment = match.group("alignment")
        return PropertyToken(
            name=match.group("name"),
            raw_text=raw,
            format=match.group("format"),
            alignment=int(alignment) if alignment is not None else None,
            destructuring=match.group("hint"),
        ), pos + 1


DEFAULT_PARSER = MessageTemplateParser()
