"""Randomness contract.

Why a Protocol:
- Generation consumes randomness; making the source an explicit dependency
  lets tests pass a seeded `random.Random` or a scripted stub.
- `random.Random` and `random.SystemRandom` satisfy it structurally.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """Minimal subset of `random.Random` used by the generators."""

    def random(self) -> float:
        """Float in [0.0, 1.0)."""

        ...

    def randrange(self, stop: int) -> int:
        """Integer in [0, stop)."""

        ...

    def choice(self, seq: Sequence[T]) -> T:
        ...
