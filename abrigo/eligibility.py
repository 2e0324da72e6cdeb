"""Eligibility checks between one animal and one adopter inventory."""
from __future__ import annotations

from typing import Iterable, Sequence

from .catalog import Animal, Catalog


def contains_subsequence(inventory: Iterable[str], pattern: Sequence[str]) -> bool:
    """Return True if ``pattern`` appears in ``inventory`` in order, gaps allowed.

    >>> contains_subsequence(["RATO", "CAIXA", "BOLA"], ["RATO", "BOLA"])
    True
    >>> contains_subsequence(["BOLA", "RATO"], ["RATO", "BOLA"])
    False
    """

    if not pattern:
        return True
    index = 0
    for item in inventory:
        if item == pattern[index]:
            index += 1
            if index == len(pattern):
                return True
    return False


def contains_all(inventory: Iterable[str], required: Iterable[str]) -> bool:
    """Return True if every required toy is in the inventory, order ignored."""

    available = set(inventory)
    return all(toy in available for toy in required)


def is_eligible(animal: Animal, inventory: Sequence[str], catalog: Catalog) -> bool:
    """Decide whether an adopter's toys satisfy an animal."""

    if catalog.is_special(animal):
        return contains_all(inventory, animal.favorite_toys)
    return contains_subsequence(inventory, animal.favorite_toys)


__all__ = ["contains_all", "contains_subsequence", "is_eligible"]
