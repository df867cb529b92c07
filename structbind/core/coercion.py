from __future__ import annotations

import logging
import types
import typing
from dataclasses import FrozenInstanceError
from functools import lru_cache
from typing import Any, Dict

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from .errors import CoercionError
from .fields import FieldDescriptor, describe, is_struct_instance
from .models import Nested, Node, tree_to_dict

log = logging.getLogger("structbind.coercion")


def weak_decode(
    tree: Dict[str, Node],
    destination: Any,
    *,
    strict: bool = False,
    case_insensitive: bool = True,
) -> None:
    """
    Pour an intermediate tree into ``destination`` in place.

    - Extracted values go through pydantic validation against the field's
      annotation (lax mode unless ``strict``): "23" -> 23, "true" -> True,
      dict -> model, list of str -> List[int], ...
    - Nested nodes decode into the existing nested instance, so fields the
      subtree does not mention keep their values. Without an instance the
      subtree is validated into a fresh one.
    - Tree keys matching no destination field are ignored.

    Raises CoercionError (with the dotted field path) on the first failure.
    """
    _decode_struct(tree, destination, strict=strict, case_insensitive=case_insensitive, prefix="")


def _decode_struct(
    tree: Dict[str, Node],
    target: Any,
    *,
    strict: bool,
    case_insensitive: bool,
    prefix: str,
) -> None:
    descriptors = describe(type(target))
    by_name = {d.name: d for d in descriptors}
    by_folded = {d.name.casefold(): d for d in descriptors} if case_insensitive else {}

    for key, node in tree.items():
        d = by_name.get(key) or by_folded.get(key.casefold())
        if d is None:
            log.debug("no destination field for key=%s type=%s", key, type(target).__name__)
            continue

        path = f"{prefix}{d.name}"
        current = getattr(target, d.name, None)
        if isinstance(node, Nested) and is_struct_instance(current):
            _decode_struct(
                node.fields,
                current,
                strict=strict,
                case_insensitive=case_insensitive,
                prefix=f"{path}.",
            )
            continue

        raw = tree_to_dict(node.fields) if isinstance(node, Nested) else node.value
        _assign(target, d, raw, strict=strict, path=path)


def _assign(target: Any, d: FieldDescriptor, raw: Any, *, strict: bool, path: str) -> None:
    try:
        if _is_instance_of(raw, d.annotation):
            # already built by the strategy (decoded body, buffer, client, ...)
            value = raw
        else:
            value = _adapter(d.annotation).validate_python(raw, strict=True if strict else None)
        setattr(target, d.name, value)
    except (ValidationError, PydanticSchemaGenerationError, FrozenInstanceError) as e:
        raise CoercionError(path, e) from e
    log.debug("coerced field=%s annotation=%r", path, d.annotation)


def _is_instance_of(value: Any, annotation: Any) -> bool:
    """True when ``value`` already satisfies a plain class or a Union of plain classes."""
    if isinstance(annotation, type) and typing.get_origin(annotation) is None:
        # bool is an int subclass; let validation decide how to coerce it
        if isinstance(value, bool) and annotation is not bool:
            return False
        return isinstance(value, annotation)
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        return value is not None and any(_is_instance_of(value, arg) for arg in typing.get_args(annotation))
    return False


def _adapter(annotation: Any) -> TypeAdapter:
    try:
        hash(annotation)
    except TypeError:
        return TypeAdapter(annotation)
    return _cached_adapter(annotation)


@lru_cache(maxsize=512)
def _cached_adapter(annotation: Any) -> TypeAdapter:
    return TypeAdapter(annotation)
