"""Pluggable candidate selection for the assignment search.

A selector maps a non-empty sequence of candidates to one of its elements.
`RandomSelector` reproduces the uniform random choice the scheduler has
always used; the deterministic selectors exist for tests and for callers
that want repeatable schedules.
"""
from __future__ import annotations

from itertools import cycle
import random
from typing import Protocol, Sequence, TypeVar

from scheduling.core.exceptions import ConfigurationError

T = TypeVar("T")


class Selector(Protocol):
    def __call__(self, candidates: Sequence[T]) -> T: ...


class RandomSelector:
    def __init__(self, seed: int | None = None) -> None:
        self.random = random.Random(seed)

    def __call__(self, candidates: Sequence[T]) -> T:
        return self.random.choice(candidates)


class FirstCandidateSelector:
    def __call__(self, candidates: Sequence[T]) -> T:
        return candidates[0]


class SequenceSelector:
    """Picks `candidates[i % len(candidates)]` for each `i` of a repeating index sequence."""

    def __init__(self, indices: Sequence[int]) -> None:
        if not indices:
            raise ConfigurationError("SequenceSelector needs at least one index")
        if any(index < 0 for index in indices):
            raise ConfigurationError("SequenceSelector indices must be non-negative")
        self._indices = cycle(list(indices))

    def __call__(self, candidates: Sequence[T]) -> T:
        return candidates[next(self._indices) % len(candidates)]


def build_selector(strategy: str, seed: int | None = None) -> Selector:
    if strategy == "random":
        return RandomSelector(seed)
    if strategy == "first":
        return FirstCandidateSelector()
    raise ConfigurationError(f"Unknown selection strategy: {strategy}")
