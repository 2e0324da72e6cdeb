"""HTTP surface for the adoption engine."""

from .app import create_app

__all__ = ["create_app"]
