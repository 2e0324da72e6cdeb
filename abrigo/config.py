"""Runtime settings for the CLI and HTTP surfaces."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .catalog import DEFAULT_CATALOG, Catalog

ENV_CATALOG = "ABRIGO_CATALOG"
ENV_LOG_LEVEL = "ABRIGO_LOG_LEVEL"
ENV_LOG_JSON = "ABRIGO_LOG_JSON"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class Settings:
    """Where the catalog comes from and how to log."""

    catalog_path: Optional[Path] = None
    log_level: str = "WARNING"
    log_json: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if environ is None else environ
        catalog_path = env.get(ENV_CATALOG) or None
        return cls(
            catalog_path=Path(catalog_path) if catalog_path else None,
            log_level=env.get(ENV_LOG_LEVEL, "WARNING"),
            log_json=env.get(ENV_LOG_JSON, "").strip().lower() in _TRUTHY,
        )

    def load_catalog(self) -> Catalog:
        if self.catalog_path is None:
            return DEFAULT_CATALOG
        return Catalog.from_yaml(self.catalog_path)


__all__ = ["ENV_CATALOG", "ENV_LOG_JSON", "ENV_LOG_LEVEL", "Settings"]
