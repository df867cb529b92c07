from .config import BinderConfig
from .directive import Directive, parse_directive
from .engine import Binder
from .errors import BindError, CoercionError, InvalidDirective, StrategyError, UnregisteredStrategy
from .fields import FieldDescriptor, describe
from .models import Bind, Extracted, Extractor, Nested, Node, tree_to_dict
from .registry import StrategyRegistry
from .coercion import weak_decode

__all__ = [
    "Bind",
    "BindError",
    "Binder",
    "BinderConfig",
    "CoercionError",
    "Directive",
    "Extracted",
    "Extractor",
    "FieldDescriptor",
    "InvalidDirective",
    "Nested",
    "Node",
    "StrategyError",
    "StrategyRegistry",
    "UnregisteredStrategy",
    "describe",
    "parse_directive",
    "tree_to_dict",
    "weak_decode",
]
