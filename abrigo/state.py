"""Per-run adoption state and result records."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from . import rules
from .exceptions import ErrorKind


class Destination(Enum):
    """Where an animal ends up after an evaluation."""

    SHELTER = 0
    ADOPTER_1 = rules.ADOPTER_1
    ADOPTER_2 = rules.ADOPTER_2

    @classmethod
    def for_adopter(cls, adopter: int) -> Destination:
        if adopter not in rules.ADOPTERS:
            raise ValueError(f"Invalid adopter index {adopter}")
        return cls(adopter)

    @property
    def adopter(self) -> Optional[int]:
        return None if self is Destination.SHELTER else self.value

    @property
    def label(self) -> str:
        if self is Destination.SHELTER:
            return rules.LABEL_SHELTER
        return rules.LABEL_ADOPTER.format(index=self.value)


class Reason(Enum):
    """Why an animal received its destination."""

    ADOPTED = "adopted"
    TIE = "tie"
    NO_MATCH = "no_match"
    TOTAL_QUOTA = "total_quota"
    SPECIES_QUOTA = "species_quota"
    NO_COMPANION = "no_companion"


@dataclass
class AdopterState:
    """Running counters for one adopter during a single evaluation."""

    total_adopted: int = 0
    quota_limited_count: int = 0

    @property
    def has_room(self) -> bool:
        return self.total_adopted < rules.MAX_ADOPTIONS

    @property
    def has_quota_limited_room(self) -> bool:
        return self.quota_limited_count < rules.MAX_QUOTA_LIMITED

    @property
    def has_companion(self) -> bool:
        return self.total_adopted >= rules.COMPANIONSHIP_MIN


Placement = Dict[str, Destination]
AdopterStates = Dict[int, AdopterState]


def new_adopter_states() -> AdopterStates:
    """Fresh counters for both adopters."""

    return {adopter: AdopterState() for adopter in rules.ADOPTERS}


@dataclass(frozen=True)
class Decision:
    """Structured record of one placement decision."""

    animal: str
    eligible: Tuple[int, ...]
    destination: Destination
    reason: Reason


@dataclass(frozen=True)
class AdoptionResult:
    """Outcome of one evaluation: either sorted placement lines or an error."""

    lines: Tuple[str, ...] = ()
    error: Optional[ErrorKind] = None
    trace: Tuple[Decision, ...] = ()

    def __post_init__(self) -> None:
        if self.error is not None and self.lines:
            raise ValueError("A failed result cannot carry placement lines")

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        if self.error is not None:
            return {"erro": self.error.message}
        return {"lista": list(self.lines)}


__all__ = [
    "AdopterState",
    "AdopterStates",
    "AdoptionResult",
    "Decision",
    "Destination",
    "Placement",
    "Reason",
    "new_adopter_states",
]
