#!/usr/bin/env python3
"""
Scored Candidate Selection

When a block holds several matches for one field, each match is scored by a
context predicate and the best one wins: highest score first, then the
earliest position in the text.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from .text import context_window

T = TypeVar("T")


@dataclass(frozen=True)
class Candidate(Generic[T]):
    """A possible field value found at `position` in the normalized text."""

    value: T
    score: int
    position: int


def select_best(candidates: Iterable[Candidate[T]]) -> Candidate[T] | None:
    """
    Pick the highest-scoring candidate, breaking ties by earliest position.

    Returns:
        The winning candidate, or None if there are none
    """
    ranked = sorted(candidates, key=lambda c: (-c.score, c.position))
    return ranked[0] if ranked else None


def score_candidates(
    matches: Iterable[tuple[T, int, int]],
    text: str,
    predicate: Callable[[str], bool],
    before: int,
    after: int,
) -> list[Candidate[T]]:
    """
    Score each (value, start, end) match by testing its context window.

    The window runs from `before` characters ahead of the match to `after`
    characters past its end. Score is 1 when the predicate holds, else 0.
    """
    scored = []
    for value, start, end in matches:
        window = context_window(text, start, end, before, after)
        scored.append(Candidate(value=value, score=1 if predicate(window) else 0, position=start))
    return scored
