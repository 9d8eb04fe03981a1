"""CoatStorage — the capability the attendant works against.

Any backend that stores coats implements these three operations; the
attendant never needs to know which concrete room it is talking to.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from coatcheck.domain.coats import Coat


class CoatStorage(ABC):
    """Abstract add / remove / list over stored coats."""

    @abstractmethod
    def add_coat(self, coat: Coat) -> None:
        """Store *coat*. Raises InvalidArgumentError if *coat* is None."""

    @abstractmethod
    def remove_coat(self, coat: Coat) -> None:
        """Remove the first stored entry that is *coat*. No-op when absent."""

    @abstractmethod
    def retrieve_coats(self) -> Sequence[Coat]:
        """Return the stored coats in insertion order, read-only."""
