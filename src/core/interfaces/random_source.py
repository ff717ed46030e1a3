"""Contract for the randomness behind the sampler.

Protocol instead of a base class: the sampler only needs `randbelow`, so
tests can pass any object with that method.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Uniform integer source.

    Rules:
    - `randbelow(upper)` returns an int in ``[0, upper)`` with every value
      equally likely, for any ``upper >= 1``.
    - Production implementations must be cryptographically secure.
    """

    def randbelow(self, upper: int) -> int:
        ...
