from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidDirective

SEPARATOR = "="


@dataclass(frozen=True)
class Directive:
    name: str
    hint: str = ""


def parse_directive(raw: str) -> Directive:
    """Parse ``name`` or ``name=hint``; anything else raises InvalidDirective."""
    parts = raw.split(SEPARATOR)
    if len(parts) > 2 or not parts[0]:
        raise InvalidDirective(raw)
    if len(parts) == 1:
        # no hint
        return Directive(name=parts[0])
    return Directive(name=parts[0], hint=parts[1])
