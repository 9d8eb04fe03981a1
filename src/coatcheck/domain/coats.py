"""Coat and Guest — the two participants in a coat-check exchange.

A coat is held by exactly one of {guest, storage} at a time. Neither class
enforces that; the attendant moves coats in a fixed order (store, then
clear; remove, then hand over).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Coat:
    """Immutable pairing of an owner name and a coat-type description.

    ``eq=False`` keeps reference identity: two coats with the same owner and
    type are still distinct coats.
    """

    owner: str
    coat_type: str


class Guest:
    """A venue guest holding at most one coat."""

    def __init__(self, name: str, coat_type: str | None = None) -> None:
        self._name = name
        self._coat: Coat | None = Coat(name, coat_type) if coat_type is not None else None

    @property
    def name(self) -> str:
        return self._name

    @property
    def coat(self) -> Coat | None:
        """The coat currently held, or None."""
        return self._coat

    @property
    def has_coat(self) -> bool:
        return self._coat is not None

    def leave_coat(self) -> None:
        """Drop the held coat. Safe to call when already empty."""
        self._coat = None

    def get_coat(self, coat: Coat) -> None:
        """Take *coat*, replacing whatever was held before.

        The caller must already have removed *coat* from storage.
        """
        self._coat = coat

    def __repr__(self) -> str:
        return f"Guest(name={self._name!r}, coat={self._coat!r})"
