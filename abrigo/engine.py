"""Adoption engine entry points."""
from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence, Tuple

from . import eligibility, formatting, rules, validation
from .catalog import DEFAULT_CATALOG, Catalog
from .exceptions import AdoptionError, ErrorKind
from .state import (
    AdopterStates,
    AdoptionResult,
    Decision,
    Destination,
    Placement,
    Reason,
    new_adopter_states,
)

logger = logging.getLogger(__name__)

Inventories = Mapping[int, Sequence[str]]


def evaluate_adoptions(
    adopter1_toys_raw: object,
    adopter2_toys_raw: object,
    animal_order_raw: object,
    catalog: Catalog = DEFAULT_CATALOG,
) -> AdoptionResult:
    """Decide every animal's destination from raw comma-separated inputs.

    Never raises: validation failures and unexpected faults come back as an
    ``AdoptionResult`` carrying a single error kind and no placement lines.
    """

    return _evaluate_raw(adopter1_toys_raw, adopter2_toys_raw, animal_order_raw, catalog, with_trace=False)


def evaluate_adoptions_with_trace(
    adopter1_toys_raw: object,
    adopter2_toys_raw: object,
    animal_order_raw: object,
    catalog: Catalog = DEFAULT_CATALOG,
) -> AdoptionResult:
    """Same as :func:`evaluate_adoptions` but keeps the per-animal decisions."""

    return _evaluate_raw(adopter1_toys_raw, adopter2_toys_raw, animal_order_raw, catalog, with_trace=True)


def evaluate(
    adopter1_toys: Sequence[str],
    adopter2_toys: Sequence[str],
    animal_order: Sequence[str],
    catalog: Catalog = DEFAULT_CATALOG,
) -> AdoptionResult:
    """Validate tokenized inputs, allocate, reconcile and assemble the result.

    Raises:
        InvalidToyError: an inventory holds an unknown or repeated toy.
        InvalidAnimalError: the order holds an unknown or repeated animal.
    """

    validation.validate_toys(adopter1_toys, catalog)
    validation.validate_toys(adopter2_toys, catalog)
    validation.validate_animals(animal_order, catalog)

    inventories = {rules.ADOPTER_1: tuple(adopter1_toys), rules.ADOPTER_2: tuple(adopter2_toys)}
    placement, states, decisions = allocate_with_trace(inventories, animal_order, catalog)
    revoked = reconcile_companionship(inventories, placement, states, catalog)
    if revoked is not None:
        decisions = decisions + (revoked,)

    return AdoptionResult(lines=formatting.placement_lines(placement), trace=decisions)


def allocate(
    inventories: Inventories,
    animal_order: Sequence[str],
    catalog: Catalog = DEFAULT_CATALOG,
) -> Tuple[Placement, AdopterStates]:
    """Run the allocation pass over already validated inputs."""

    placement, states, _ = allocate_with_trace(inventories, animal_order, catalog)
    return placement, states


def allocate_with_trace(
    inventories: Inventories,
    animal_order: Sequence[str],
    catalog: Catalog = DEFAULT_CATALOG,
) -> Tuple[Placement, AdopterStates, Tuple[Decision, ...]]:
    """Run the allocation pass and return the decision taken for each animal."""

    states = new_adopter_states()
    placement: Placement = {}
    decisions: List[Decision] = []

    for name in animal_order:
        animal = catalog.animal(name)
        eligible = tuple(
            adopter for adopter in states if eligibility.is_eligible(animal, inventories[adopter], catalog)
        )

        if len(eligible) != 1:
            reason = Reason.TIE if eligible else Reason.NO_MATCH
            decision = Decision(name, eligible, Destination.SHELTER, reason)
        else:
            candidate = eligible[0]
            adopter_state = states[candidate]
            if not adopter_state.has_room:
                decision = Decision(name, eligible, Destination.SHELTER, Reason.TOTAL_QUOTA)
            elif catalog.is_quota_limited(animal) and not adopter_state.has_quota_limited_room:
                decision = Decision(name, eligible, Destination.SHELTER, Reason.SPECIES_QUOTA)
            else:
                adopter_state.total_adopted += 1
                if catalog.is_quota_limited(animal):
                    adopter_state.quota_limited_count += 1
                decision = Decision(name, eligible, Destination.for_adopter(candidate), Reason.ADOPTED)

        placement[name] = decision.destination
        decisions.append(decision)
        logger.debug("%s -> %s (%s)", name, decision.destination.label, decision.reason.value)

    return placement, states, tuple(decisions)


def reconcile_companionship(
    inventories: Inventories,
    placement: Placement,
    states: AdopterStates,
    catalog: Catalog = DEFAULT_CATALOG,
) -> Optional[Decision]:
    """Send the specially-ruled animal back to the shelter if it lacks a companion.

    Runs after the whole allocation pass, so animals placed later in the order
    still count as companions. Mutates ``placement`` and ``states`` and returns
    the revocation decision, or None when nothing changed.
    """

    special = catalog.special_animal
    destination = placement.get(special.name)
    if destination is None or destination is Destination.SHELTER:
        return None

    winner = destination.adopter
    has_all_toys = eligibility.contains_all(inventories[winner], special.favorite_toys)
    if has_all_toys and states[winner].has_companion:
        return None

    placement[special.name] = Destination.SHELTER
    states[winner].total_adopted -= 1
    logger.debug("%s returned to shelter: adopter %d has no companion for it", special.name, winner)
    return Decision(special.name, (winner,), Destination.SHELTER, Reason.NO_COMPANION)


def _evaluate_raw(
    adopter1_toys_raw: object,
    adopter2_toys_raw: object,
    animal_order_raw: object,
    catalog: Catalog,
    *,
    with_trace: bool,
) -> AdoptionResult:
    try:
        result = evaluate(
            formatting.parse_list(adopter1_toys_raw),
            formatting.parse_list(adopter2_toys_raw),
            formatting.parse_list(animal_order_raw),
            catalog,
        )
    except AdoptionError as exc:
        logger.warning("Rejected input: %s", exc)
        return AdoptionResult(error=exc.kind)
    except Exception:
        logger.exception("Unexpected failure while evaluating adoptions")
        return AdoptionResult(error=ErrorKind.INVALID_TOY)

    logger.info("Evaluated %d animal(s)", len(result.lines))
    if with_trace:
        return result
    return AdoptionResult(lines=result.lines)


__all__ = [
    "allocate",
    "allocate_with_trace",
    "evaluate",
    "evaluate_adoptions",
    "evaluate_adoptions_with_trace",
    "reconcile_companionship",
]
