from __future__ import annotations

import logging
from typing import Any, Dict, Generic, Optional

from .coercion import weak_decode
from .config import BinderConfig
from .directive import parse_directive
from .fields import describe, is_frozen_instance, is_struct_instance, is_struct_type
from .models import Extracted, Extractor, Nested, Node, S
from .registry import StrategyRegistry

log = logging.getLogger("structbind.binder")


class Binder(Generic[S]):
    """
    Populates a pydantic model or dataclass instance from an arbitrary source.

    Each field opts in with a directive (``"query=param1"``, ``"body"``); the
    named strategy extracts a loosely typed value from the source and the
    collected values are then coerced into the destination's field types.
    Undirected fields whose type is itself a model/dataclass are traversed
    recursively with the same source.
    """

    def __init__(
        self,
        registry: Optional[StrategyRegistry[S]] = None,
        *,
        config: Optional[BinderConfig] = None,
    ):
        self.registry: StrategyRegistry[S] = registry if registry is not None else StrategyRegistry()
        self.config = config or BinderConfig.from_env()

    def register(self, name: str, strategy: Extractor[S]) -> "Binder[S]":
        self.registry.register(name, strategy)
        return self

    def bind(self, source: S, destination: Any) -> None:
        """
        Raises InvalidDirective, UnregisteredStrategy, CoercionError, or whatever
        a strategy raised. Nothing is written to ``destination`` unless every
        strategy succeeded; after a CoercionError its state is indeterminate.
        """
        tree = self.collect(source, destination)
        weak_decode(
            tree,
            destination,
            strict=self.config.strict,
            case_insensitive=self.config.case_insensitive,
        )

    def collect(self, source: S, destination: Any) -> Dict[str, Node]:
        """Run every strategy and return the intermediate tree without coercing it."""
        if not is_struct_instance(destination):
            raise TypeError(
                f"destination must be a pydantic model or dataclass instance, got {type(destination).__name__}"
            )
        if is_frozen_instance(destination):
            raise TypeError(f"destination {type(destination).__name__} is frozen and cannot be bound in place")
        return self._process_fields(source, type(destination))

    def _process_fields(self, source: S, cls: type) -> Dict[str, Node]:
        values: Dict[str, Node] = {}
        for d in describe(cls, self.config.tag):
            if d.directive is not None:
                self._extract_value(source, d.directive, d.name, d.annotation, values)
                continue

            # no directive on a struct-typed field: deep dive with the same source
            if is_struct_type(d.annotation):
                values[d.name] = Nested(self._process_fields(source, d.annotation))

        return values

    def _extract_value(
        self,
        source: S,
        raw_directive: str,
        field_name: str,
        field_type: Any,
        values: Dict[str, Node],
    ) -> None:
        directive = parse_directive(raw_directive)
        strategy = self.registry.lookup(directive.name)

        log.debug("extract field=%s binding=%s hint=%s", field_name, directive.name, directive.hint)
        value = strategy(directive.hint, field_type, source)
        if value is None:
            log.debug("skip field=%s binding=%s reason=absent", field_name, directive.name)
            return
        values[field_name] = Extracted(value)
