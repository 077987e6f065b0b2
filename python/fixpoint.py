"""
Generic solve-to-fixpoint with a minimal-basis filter.

The caller supplies an inference step. Each call either derives one new fact
(Propagate) or names the facts that are not part of the minimal basis
(ManyTrue). The solver owns loop control and the cache of seen facts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Iterable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


# =============================================================================
# Inference Results
# =============================================================================


@dataclass(frozen=True)
class Propagate(Generic[T]):
    """A new fact derived from the current facts."""

    fact: T


@dataclass(frozen=True)
class ManyTrue(Generic[T]):
    """Facts implied by the others, to be removed from the basis."""

    facts: tuple[T, ...]


Inference = Propagate[T] | ManyTrue[T]
InferFn = Callable[[set[T], list[T]], "Inference[T] | None"]


# =============================================================================
# Solver
# =============================================================================


def solve_minimum(facts: Iterable[T], infer: InferFn[T]) -> list[T]:
    """
    Run `infer` until it stops producing changes and return the remaining facts.

    Args:
        facts: Initial facts. Duplicates are dropped, first occurrence kept.
        infer: Called with (cache, facts). Returning None ends the loop.

    Returns:
        The facts left after every ManyTrue removal, in insertion order.
    """
    current: list[T] = []
    cache: set[T] = set()
    for fact in facts:
        if fact not in cache:
            cache.add(fact)
            current.append(fact)

    propagated = 0
    removed = 0
    while True:
        inference = infer(cache, current)
        match inference:
            case None:
                break
            case Propagate(fact=fact):
                current.append(fact)
                cache.add(fact)
                propagated += 1
            case ManyTrue(facts=redundant):
                drop = set(redundant)
                kept = [f for f in current if f not in drop]
                if len(kept) == len(current):
                    break
                removed += len(current) - len(kept)
                current = kept
            case _:
                raise ValueError(f"Unknown inference result: {inference!r}")

    logger.debug(
        "solve_minimum: propagated=%d, removed=%d, remaining=%d",
        propagated,
        removed,
        len(current),
    )
    return current
