"""Identifier generators injected into the analysis pipeline.

Clauses, risk flags, results and assessments receive ids from a generator
object rather than from the wall clock, so tests can pin them down.
"""

from __future__ import annotations

import itertools
import uuid
from collections import defaultdict
from typing import Iterator, Protocol


class IdGenerator(Protocol):
    """Callable that returns a fresh identifier for the given kind of object."""

    def __call__(self, prefix: str) -> str: ...


class SequentialIdGenerator:
    """Deterministic ids of the form ``<prefix>_<n>``, counted per prefix.

    Example::

        ids = SequentialIdGenerator()
        ids("clause")  # "clause_1"
        ids("clause")  # "clause_2"
        ids("flag")    # "flag_1"
    """

    def __init__(self, start: int = 1) -> None:
        self._start = start
        self._counters: dict[str, Iterator[int]] = defaultdict(lambda: itertools.count(self._start))

    def __call__(self, prefix: str) -> str:
        return f"{prefix}_{next(self._counters[prefix])}"

    def reset(self) -> None:
        self._counters.clear()


class UuidIdGenerator:
    """Random ids of the form ``<prefix>_<12 hex chars>``."""

    def __call__(self, prefix: str) -> str:
        return f"{prefix}_{uuid.uuid4().hex[:12]}"
