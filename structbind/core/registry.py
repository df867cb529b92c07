from __future__ import annotations

from typing import Dict, Generic, List

from .errors import UnregisteredStrategy
from .models import Extractor, S


class StrategyRegistry(Generic[S]):
    """
    Named extraction strategies, keyed by binding name ("query", "header", "body", ...).

    Register everything before binding starts; registration is not synchronized
    against concurrent binds.
    """

    def __init__(self):
        self._strategies: Dict[str, Extractor[S]] = {}

    def register(self, name: str, strategy: Extractor[S]) -> "StrategyRegistry[S]":
        # last registration wins
        self._strategies[name] = strategy
        return self

    def lookup(self, name: str) -> Extractor[S]:
        strategy = self._strategies.get(name)
        if strategy is None:
            raise UnregisteredStrategy(name)
        return strategy

    def names(self) -> List[str]:
        return sorted(self._strategies.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._strategies

    def __len__(self) -> int:
        return len(self._strategies)
