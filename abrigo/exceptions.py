"""Custom exception classes for the adoption engine."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Error codes reported to callers, valued with their user-facing message."""

    INVALID_TOY = "Brinquedo inválido"
    INVALID_ANIMAL = "Animal inválido"

    @property
    def message(self) -> str:
        return self.value


class AdoptionError(Exception):
    """Base exception for all adoption engine errors."""

    kind: ErrorKind = ErrorKind.INVALID_TOY

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(self.kind.message if detail is None else f"{self.kind.message}: {detail}")


class InvalidToyError(AdoptionError):
    """Raised when a toy inventory holds an unknown or repeated toy."""

    kind = ErrorKind.INVALID_TOY


class InvalidAnimalError(AdoptionError):
    """Raised when the processing order holds an unknown or repeated animal."""

    kind = ErrorKind.INVALID_ANIMAL


class CatalogError(ValueError):
    """Raised when a catalog definition is inconsistent."""


__all__ = [
    "AdoptionError",
    "CatalogError",
    "ErrorKind",
    "InvalidAnimalError",
    "InvalidToyError",
]
