"""Core rule constants for the adoption engine."""
from __future__ import annotations

# Adopter identifiers used across the engine, CLI and API layers.
ADOPTER_1 = 1
ADOPTER_2 = 2
ADOPTERS = (ADOPTER_1, ADOPTER_2)

MAX_ADOPTIONS = 3
MAX_QUOTA_LIMITED = 1
# The specially-ruled animal needs at least one other animal with the same adopter.
COMPANIONSHIP_MIN = 2

SPECIES_DOG = "cão"
SPECIES_CAT = "gato"
SPECIES_TORTOISE = "jabuti"

QUOTA_LIMITED_SPECIES = SPECIES_CAT
SPECIAL_SPECIES = SPECIES_TORTOISE

TOY_MOUSE = "RATO"
TOY_BALL = "BOLA"
TOY_LASER = "LASER"
TOY_BOX = "CAIXA"
TOY_YARN = "NOVELO"
TOY_SKATE = "SKATE"

VALID_TOYS: frozenset[str] = frozenset({
    TOY_MOUSE,
    TOY_BALL,
    TOY_LASER,
    TOY_BOX,
    TOY_YARN,
    TOY_SKATE,
})

LABEL_SHELTER = "abrigo"
LABEL_ADOPTER = "pessoa {index}"

if MAX_QUOTA_LIMITED > MAX_ADOPTIONS:
    raise ValueError("Quota-limited cap cannot exceed the total adoption cap")

__all__ = [
    "ADOPTERS",
    "ADOPTER_1",
    "ADOPTER_2",
    "COMPANIONSHIP_MIN",
    "LABEL_ADOPTER",
    "LABEL_SHELTER",
    "MAX_ADOPTIONS",
    "MAX_QUOTA_LIMITED",
    "QUOTA_LIMITED_SPECIES",
    "SPECIAL_SPECIES",
    "SPECIES_CAT",
    "SPECIES_DOG",
    "SPECIES_TORTOISE",
    "TOY_BALL",
    "TOY_BOX",
    "TOY_LASER",
    "TOY_MOUSE",
    "TOY_SKATE",
    "TOY_YARN",
    "VALID_TOYS",
]
