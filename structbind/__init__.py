"""Source-agnostic field binder.

Declare where each field comes from, register one strategy per source kind,
and let pydantic's lax validation coerce the extracted values into place.
"""

from .core import (
    Bind,
    BindError,
    Binder,
    BinderConfig,
    CoercionError,
    InvalidDirective,
    StrategyError,
    StrategyRegistry,
    UnregisteredStrategy,
)

__version__ = "0.1.0"

__all__ = [
    "Bind",
    "BindError",
    "Binder",
    "BinderConfig",
    "CoercionError",
    "InvalidDirective",
    "StrategyError",
    "StrategyRegistry",
    "UnregisteredStrategy",
]
