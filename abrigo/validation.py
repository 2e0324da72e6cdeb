"""Input validation run before any allocation."""
from __future__ import annotations

from typing import Sequence

from .catalog import Catalog
from .exceptions import InvalidAnimalError, InvalidToyError


def validate_toys(toys: Sequence[str], catalog: Catalog) -> None:
    """Reject an inventory with a repeated toy or a toy outside the catalog."""

    seen: set[str] = set()
    for toy in toys:
        if not isinstance(toy, str):
            raise InvalidToyError(f"unexpected token {toy!r}")
        if toy in seen:
            raise InvalidToyError(f"repeated toy {toy}")
        seen.add(toy)
        if toy not in catalog.toys:
            raise InvalidToyError(f"unknown toy {toy}")


def validate_animals(names: Sequence[str], catalog: Catalog) -> None:
    """Reject a processing order with a repeated or uncatalogued animal."""

    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise InvalidAnimalError(f"repeated animal {name}")
        seen.add(name)
        if name not in catalog:
            raise InvalidAnimalError(f"unknown animal {name}")


__all__ = ["validate_animals", "validate_toys"]
