"""Immutable animal catalog consumed by the adoption engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple

from . import rules
from .exceptions import CatalogError


def _as_list(value: Any, field_name: str) -> list:
    if not isinstance(value, list):
        raise CatalogError(f"Catalog field {field_name!r} must be a list, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Animal:
    """A catalog entry: a named animal and the toys it likes, in order."""

    name: str
    species: str
    favorite_toys: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise CatalogError("Animal name must not be empty")
        if len(set(self.favorite_toys)) != len(self.favorite_toys):
            raise CatalogError(f"Repeated favorite toy for {self.name}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Animal:
        if not isinstance(data, dict):
            raise CatalogError(f"Animal entry must be a mapping, got {data!r}")
        try:
            return cls(
                name=str(data["name"]),
                species=str(data["species"]),
                favorite_toys=tuple(str(toy) for toy in _as_list(data.get("toys", []), "toys")),
            )
        except KeyError as exc:
            raise CatalogError(f"Animal entry missing field {exc.args[0]!r}") from exc

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "species": self.species, "toys": list(self.favorite_toys)}


@dataclass(frozen=True)
class Catalog:
    """Read-only configuration: the animals, the valid toys and the species rules.

    ``quota_limited_species`` names the species capped per adopter and
    ``special_species`` names the species of the single animal that uses the
    all-toys rule and needs a companion.
    """

    animals: Tuple[Animal, ...]
    toys: frozenset[str]
    quota_limited_species: str = rules.QUOTA_LIMITED_SPECIES
    special_species: str = rules.SPECIAL_SPECIES
    _by_name: Dict[str, Animal] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_name: Dict[str, Animal] = {}
        for animal in self.animals:
            if animal.name in by_name:
                raise CatalogError(f"Duplicate animal name: {animal.name}")
            unknown = [toy for toy in animal.favorite_toys if toy not in self.toys]
            if unknown:
                raise CatalogError(f"Unknown toys for {animal.name}: {', '.join(unknown)}")
            by_name[animal.name] = animal

        if self.quota_limited_species == self.special_species:
            raise CatalogError("Quota-limited and specially-ruled species must differ")
        special = [animal for animal in self.animals if animal.species == self.special_species]
        if len(special) != 1:
            raise CatalogError(
                f"Expected exactly one {self.special_species!r} animal, found {len(special)}"
            )
        object.__setattr__(self, "_by_name", by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Animal]:
        return iter(self.animals)

    def __len__(self) -> int:
        return len(self.animals)

    def get(self, name: str) -> Optional[Animal]:
        return self._by_name.get(name)

    def animal(self, name: str) -> Animal:
        try:
            return self._by_name[name]
        except KeyError as exc:
            raise KeyError(f"Unknown animal: {name}") from exc

    @property
    def special_animal(self) -> Animal:
        return next(animal for animal in self.animals if animal.species == self.special_species)

    def is_special(self, animal: Animal) -> bool:
        return animal.species == self.special_species

    def is_quota_limited(self, animal: Animal) -> bool:
        return animal.species == self.quota_limited_species

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "toys": sorted(self.toys),
            "quota_limited_species": self.quota_limited_species,
            "special_species": self.special_species,
            "animals": [animal.to_dict() for animal in self.animals],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Catalog:
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise CatalogError("Catalog definition must be a mapping")
        if "animals" not in data or "toys" not in data:
            raise CatalogError("Catalog definition requires 'animals' and 'toys'")

        return cls(
            animals=tuple(Animal.from_dict(entry) for entry in _as_list(data["animals"], "animals")),
            toys=frozenset(str(toy) for toy in _as_list(data["toys"], "toys")),
            quota_limited_species=str(data.get("quota_limited_species", rules.QUOTA_LIMITED_SPECIES)),
            special_species=str(data.get("special_species", rules.SPECIAL_SPECIES)),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> Catalog:
        """Load a catalog from a YAML file."""
        import yaml

        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise CatalogError(f"Malformed catalog file {path}: {exc}") from exc

        return cls.from_dict(data)


DEFAULT_CATALOG = Catalog(
    animals=(
        Animal("Rex", rules.SPECIES_DOG, (rules.TOY_MOUSE, rules.TOY_BALL)),
        Animal("Mimi", rules.SPECIES_CAT, (rules.TOY_BALL, rules.TOY_LASER)),
        Animal("Fofo", rules.SPECIES_CAT, (rules.TOY_BALL, rules.TOY_MOUSE, rules.TOY_LASER)),
        Animal("Zero", rules.SPECIES_CAT, (rules.TOY_MOUSE, rules.TOY_BALL)),
        Animal("Bola", rules.SPECIES_DOG, (rules.TOY_BOX, rules.TOY_YARN)),
        Animal("Bebe", rules.SPECIES_DOG, (rules.TOY_LASER, rules.TOY_MOUSE, rules.TOY_BALL)),
        Animal("Loco", rules.SPECIES_TORTOISE, (rules.TOY_SKATE, rules.TOY_MOUSE)),
    ),
    toys=rules.VALID_TOYS,
)

__all__ = ["Animal", "Catalog", "DEFAULT_CATALOG"]
