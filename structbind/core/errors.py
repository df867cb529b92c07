from __future__ import annotations

from typing import Optional


class BindError(Exception):
    pass


class InvalidDirective(BindError):
    def __init__(self, directive: str):
        self.directive = directive
        super().__init__(f"invalid binding definition: {directive}. should be [binding=hint]")


class UnregisteredStrategy(BindError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no registered binding for: {name}")


class StrategyError(BindError):
    """
    Optional base for errors raised by extraction strategies.

    The binder never wraps or catches what a strategy raises; strategies are
    free to raise anything. This class only gives them a shared type to use.
    """


class CoercionError(BindError):
    def __init__(self, field: str, cause: Optional[BaseException] = None):
        self.field = field
        self.cause = cause
        msg = f"cannot coerce value for field '{field}'"
        if cause is not None:
            msg = f"{msg}: {cause}"
        super().__init__(msg)
