"""Animal shelter adoption engine package."""

from . import catalog, eligibility, engine, exceptions, formatting, rules, state, validation
from .engine import evaluate_adoptions

__all__ = [
    "catalog",
    "eligibility",
    "engine",
    "evaluate_adoptions",
    "exceptions",
    "formatting",
    "rules",
    "state",
    "validation",
]
