import random
import secrets
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol, TypeVar, runtime_checkable

__all__ = (
    "RandomSource",
    "SystemRandomSource",
    "SeededRandomSource",
    "choice",
)

T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """
    Supplies uniformly distributed integers.

    Everything that consumes randomness in this package goes through this
    interface, so callers can inject a deterministic implementation.
    """

    def randbelow(self, upper: int) -> int:
        """Returns an integer in the range ``[0, upper)``."""
        ...


@dataclass(slots=True, frozen=True)
class SystemRandomSource:
    """Backed by the operating system CSPRNG via :mod:`secrets`."""

    def randbelow(self, upper: int) -> int:
        return secrets.randbelow(upper)


@dataclass(slots=True)
class SeededRandomSource:
    """
    Reproducible source for tests and deterministic derivations.

    Warning:
        Not suitable for generating secrets from an unpredictable seed; use
        :class:`SystemRandomSource` for that.
    """

    seed: int | str | bytes
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def randbelow(self, upper: int) -> int:
        return self._rng.randrange(upper)


def choice(source: RandomSource, seq: Sequence[T]) -> T:
    if not seq:
        raise IndexError("Cannot choose from an empty sequence")
    return seq[source.randbelow(len(seq))]
