"""Runtime settings and catalog-file loading.

Settings are read from the environment (optionally primed from a local ``.env``
by the CLI via ``python-dotenv``). CLI options take precedence over these.

Environment
-----------
- ``RCM_MACHINE_ID``: machine identifier shown in the summary (default ``RCM-1``).
- ``RCM_LOCATION``: machine location (default ``Unknown``).
- ``RCM_CATALOG_PATH``: optional JSON catalog file replacing the default seed.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from pydantic import ValidationError

from .catalog import Catalog
from .logging_setup import get_logger
from .models import CatalogEntry, CatalogFile

_log = get_logger("recycling_machine.config")

DEFAULT_MACHINE_ID = "RCM-1"
DEFAULT_LOCATION = "Unknown"


@dataclass(frozen=True, slots=True)
class Settings:
    machine_id: str = DEFAULT_MACHINE_ID
    location: str = DEFAULT_LOCATION
    catalog_path: Path | None = None

    @classmethod
    def from_env(cls) -> Settings:
        machine_id = (os.getenv("RCM_MACHINE_ID") or "").strip() or DEFAULT_MACHINE_ID
        location = (os.getenv("RCM_LOCATION") or "").strip() or DEFAULT_LOCATION
        raw_path = (os.getenv("RCM_CATALOG_PATH") or "").strip()
        return cls(
            machine_id=machine_id,
            location=location,
            catalog_path=Path(raw_path) if raw_path else None,
        )

    def override(
        self,
        *,
        machine_id: str | None = None,
        location: str | None = None,
        catalog_path: Path | None = None,
    ) -> Settings:
        """Return a copy with any non-``None`` arguments applied."""

        return Settings(
            machine_id=machine_id or self.machine_id,
            location=location or self.location,
            catalog_path=catalog_path or self.catalog_path,
        )


def load_catalog(path: str | PathLike[str]) -> Catalog:
    """Read a JSON catalog file into a :class:`Catalog`.

    Raises ``ValueError`` with a readable message when the file is not valid
    JSON, does not match :class:`CatalogFile`, or repeats a type. I/O errors
    (missing file, permissions) propagate unchanged.
    """

    p = Path(path)
    text = p.read_text(encoding="utf-8")
    try:
        parsed = CatalogFile.model_validate(json.loads(text))
    except json.JSONDecodeError as e:
        raise ValueError(f"catalog file {p} is not valid JSON: {e}") from e
    except ValidationError as e:
        raise ValueError(f"catalog file {p} failed validation: {e}") from e

    catalog = Catalog(CatalogEntry(item.type, item.price_per_weight) for item in parsed.entries)
    _log.debug("loaded %d catalog entries from %s", len(catalog), p)
    return catalog


__all__ = ["Settings", "load_catalog", "DEFAULT_MACHINE_ID", "DEFAULT_LOCATION"]
