from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol, TypeVar

T = TypeVar("T", covariant=True)


class MatchStrategy(Protocol[T]):
    def match(self, *args: Any, **kwargs: Any) -> Optional[T]:
        raise NotImplementedError


def first_success(strategies: Iterable[MatchStrategy[T]], *args: Any, **kwargs: Any) -> Optional[T]:
    """Run strategies in order and return the first non-None result."""

    for strategy in strategies:
        result = strategy.match(*args, **kwargs)
        if result is not None:
            return result
    return None
