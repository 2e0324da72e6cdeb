"""Shared parsing and formatting utilities around the engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Tuple

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .state import Decision, Destination


def parse_list(raw: Any) -> List[str]:
    """
    Split a comma-separated string into trimmed, non-empty tokens.

    Args:
        raw: The raw input; anything that is not a string counts as empty

    Returns:
        A list like ["RATO", "BOLA"] for " RATO , BOLA,"
    """
    if not isinstance(raw, str) or not raw.strip():
        return []
    return [token.strip() for token in raw.split(",") if token.strip()]


def placement_line(name: str, destination: Destination) -> str:
    """
    Return the human-readable line for one placement.

    Args:
        name: The animal name
        destination: Where the animal ended up

    Returns:
        A string like "Rex - pessoa 1"
    """
    return f"{name} - {destination.label}"


def placement_lines(placement: Mapping[str, Destination]) -> Tuple[str, ...]:
    """Format a placement mapping as lines sorted by animal name."""
    return tuple(placement_line(name, placement[name]) for name in sorted(placement))


def decision_view(decision: Decision) -> dict:
    """Serialize a decision for JSON output."""
    return {
        "animal": decision.animal,
        "eligible": list(decision.eligible),
        "destination": decision.destination.label,
        "reason": decision.reason.value,
    }


__all__ = ["decision_view", "parse_list", "placement_line", "placement_lines"]
