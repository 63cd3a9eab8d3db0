"""
Precomputed renderings of formatted template properties.
"""
from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from ..dto.template import MessageTemplate


@dataclass(frozen=True)
class Rendering:
    name: str
    format: str
    text: str


NO_RENDERINGS: Tuple[Rendering, ...] = ()


def correlate_renderings(template: MessageTemplate, renderings: Sequence[Any]) -> Tuple[Rendering, ...]:
    """
    Pair rendering strings with the template's formatted property tokens.

    The n-th rendering belongs to the n-th property token that carries a
    format. When the counts differ the shorter side wins, and unpaired
    renderings are neither used nor checked.
    """
    formatted = [t for t in template.property_tokens if t.format is not None]
    paired = []
    for token, text in zip(formatted, renderings):
        if not isinstance(text, str):
            raise TypeError(f"Rendering for `{token.name}` is not a string")
        paired.append(Rendering(name=token.name, format=token.format, text=text))
    return tuple(paired)


def renderings_for(name: str, renderings: Sequence[Rendering]) -> Tuple[Rendering, ...]:
    if not renderings:
        return NO_RENDERINGS
    return tuple(r for r in renderings if r.name == name)
