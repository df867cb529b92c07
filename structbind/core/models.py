from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, TypeVar, Union

S = TypeVar("S")

# (hint, field_type, source) -> value; None means "absent", failures raise.
Extractor = Callable[[str, Any, S], Any]


@dataclass(frozen=True)
class Bind:
    """
    Directive marker for ``typing.Annotated`` metadata::

        param1: Annotated[int, Bind("query=param1")] = 1
    """

    directive: str


@dataclass(frozen=True)
class Extracted:
    value: Any


@dataclass
class Nested:
    fields: Dict[str, "Node"] = field(default_factory=dict)


Node = Union[Extracted, Nested]


def tree_to_dict(tree: Dict[str, Node]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name, node in tree.items():
        if isinstance(node, Nested):
            out[name] = tree_to_dict(node.fields)
        else:
            out[name] = node.value
    return out
