from __future__ import annotations

import dataclasses
import typing
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Iterable, Optional, Tuple

from pydantic import BaseModel

from .models import Bind


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    annotation: Any
    directive: Optional[str] = None


def is_struct_type(tp: Any) -> bool:
    if not isinstance(tp, type):
        return False
    return issubclass(tp, BaseModel) or dataclasses.is_dataclass(tp)


def is_struct_instance(obj: Any) -> bool:
    return not isinstance(obj, type) and is_struct_type(type(obj))


def is_frozen_instance(obj: Any) -> bool:
    if isinstance(obj, BaseModel):
        return bool(type(obj).model_config.get("frozen"))
    params = getattr(type(obj), "__dataclass_params__", None)
    return bool(getattr(params, "frozen", False))


def describe(cls: type, tag: str = "bind") -> Tuple[FieldDescriptor, ...]:
    """
    Field declarations of a pydantic model or dataclass, in declaration order.

    Directive lookup order per field:
      1) Bind(...) inside Annotated metadata
      2) dataclasses.field(metadata={tag: ...})
      3) pydantic Field(json_schema_extra={tag: ...})
    """
    if not is_struct_type(cls):
        raise TypeError(f"{cls!r} is neither a pydantic model nor a dataclass")
    return _describe(cls, tag)


@lru_cache(maxsize=256)
def _describe(cls: type, tag: str) -> Tuple[FieldDescriptor, ...]:
    if issubclass(cls, BaseModel):
        return tuple(_describe_model(cls, tag))
    return tuple(_describe_dataclass(cls, tag))


def _describe_model(cls: type, tag: str) -> Iterable[FieldDescriptor]:
    for name, info in cls.model_fields.items():
        directive = _marker_directive(info.metadata)
        if directive is None:
            extra = info.json_schema_extra
            if isinstance(extra, dict) and isinstance(extra.get(tag), str):
                directive = extra[tag]
        yield FieldDescriptor(name=name, annotation=info.annotation, directive=directive)


def _describe_dataclass(cls: type, tag: str) -> Iterable[FieldDescriptor]:
    hints = _resolve_hints(cls)

    for f in dataclasses.fields(cls):
        annotation, metadata = _unwrap(hints.get(f.name, f.type))
        directive = _marker_directive(metadata)
        if directive is None and isinstance(f.metadata.get(tag), str):
            directive = f.metadata[tag]
        yield FieldDescriptor(name=f.name, annotation=annotation, directive=directive)


def _resolve_hints(cls: type) -> Dict[str, Any]:
    # globals stay per base class (each base's own module); locals add the class itself
    localns = {cls.__name__: cls, **vars(cls)}
    try:
        return typing.get_type_hints(cls, localns=localns, include_extras=True)
    except NameError as e:
        missing = getattr(e, "name", None)
        fields = [
            f.name
            for f in dataclasses.fields(cls)
            if isinstance(f.type, str) and (missing is None or missing in f.type)
        ]
        raise TypeError(
            f"cannot resolve annotations of {cls.__qualname__} (fields: {', '.join(fields) or '?'}): {e}. "
            "Classes referenced from string annotations must be importable from the defining module"
        ) from e


def _unwrap(hint: Any) -> Tuple[Any, Tuple[Any, ...]]:
    if typing.get_origin(hint) is typing.Annotated:
        return typing.get_args(hint)[0], tuple(hint.__metadata__)
    return hint, ()


def _marker_directive(metadata: Iterable[Any]) -> Optional[str]:
    for m in metadata or ():
        if isinstance(m, Bind):
            return m.directive
    return None
