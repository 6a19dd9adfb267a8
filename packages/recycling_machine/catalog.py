"""Catalog of item types a machine accepts, with helpers for type names.

Every catalog operation (lookup, add, upsert, remove) keys on the normalized
type, so ``"GLASS "``, ``"Glass"`` and ``"glass"`` all address the same entry
and a type can never appear twice.

Exports
-------
- ``normalize_type(...)`` and ``validate_type(...)``: name helpers shared with
  the terminal UI and the catalog file loader.
- ``Catalog``: the ordered registry. Insertion order is kept for display only.
- ``default_catalog()``: the seed entries every new machine starts with.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from decimal import Decimal
from typing import NamedTuple

from .logging_setup import get_logger
from .models import CatalogEntry, to_decimal

_log = get_logger("recycling_machine.catalog")

# ---------------------------
# Type normalization/validation
# ---------------------------

_ALLOWED_RE = re.compile(r"^[a-z0-9_\-]+$")

DEFAULT_PRICES: tuple[tuple[str, str], ...] = (
    ("plastic", "1.2"),
    ("aluminium", "2.2"),
    ("glass", "1.8"),
)


def normalize_type(raw: str) -> str:
    """Return ``raw`` with all whitespace removed and lower-cased."""

    return "".join(raw.split()).lower()


@dataclass(frozen=True, slots=True)
class TypeValidation:
    ok: bool
    reason: str | None = None


def validate_type(raw: str, *, max_len: int = 32) -> TypeValidation:
    """Check a type name before it is added to a catalog.

    Rules
    -----
    - Normalized form must be non-empty and at most ``max_len`` characters.
    - Allowed characters: letters, numbers, ``-`` and ``_``.
    """

    n = normalize_type(raw)
    if not n:
        return TypeValidation(False, "Type cannot be empty")
    if len(n) > max_len:
        return TypeValidation(False, f"Type must be at most {max_len} characters")
    if not _ALLOWED_RE.match(n):
        return TypeValidation(False, "Only letters, numbers, - and _ are allowed")
    return TypeValidation(True, None)


class UpsertResult(NamedTuple):
    entry: CatalogEntry
    created: bool


class Catalog:
    """Ordered registry of :class:`CatalogEntry` unique by normalized type."""

    def __init__(self, entries: Iterable[CatalogEntry] = ()) -> None:
        self._entries: list[CatalogEntry] = []
        for entry in entries:
            if not self.add(entry):
                raise ValueError(f"Duplicate catalog type: {entry.type!r}")

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item_type: object) -> bool:
        return isinstance(item_type, str) and self.lookup(item_type) is not None

    def __repr__(self) -> str:  # pragma: no cover - trivial repr
        return f"Catalog({self._entries!r})"

    def types(self) -> list[str]:
        return [e.type for e in self._entries]

    def lookup(self, item_type: str) -> CatalogEntry | None:
        """Return the entry for ``item_type`` or ``None`` when not accepted."""

        key = normalize_type(item_type)
        for entry in self._entries:
            if entry.type == key:
                return entry
        return None

    def add(self, entry: CatalogEntry) -> bool:
        """Insert ``entry`` unless its type is already present.

        Returns ``True`` when the entry was inserted. An existing entry with the
        same type keeps its price; use :meth:`upsert` to change it.
        """

        v = validate_type(entry.type)
        if not v.ok:
            raise ValueError(f"Invalid item type {entry.type!r}: {v.reason}")
        key = normalize_type(entry.type)
        if self.lookup(key) is not None:
            return False
        entry.type = key
        self._entries.append(entry)
        _log.debug("catalog add type=%s price=%s", entry.type, entry.price_per_weight)
        return True

    def upsert(self, item_type: str, price: Decimal | int | float | str) -> UpsertResult:
        """Set the price for ``item_type``, adding the type when missing."""

        existing = self.lookup(item_type)
        if existing is None:
            entry = CatalogEntry(item_type, to_decimal(price))
            self.add(entry)
            return UpsertResult(entry, True)
        updated = CatalogEntry(existing.type, to_decimal(price))
        existing.price_per_weight = updated.price_per_weight
        _log.debug("catalog update type=%s price=%s", existing.type, existing.price_per_weight)
        return UpsertResult(existing, False)

    def remove(self, item_type: str) -> bool:
        """Remove the entry for ``item_type``; ``False`` when it was not present."""

        entry = self.lookup(item_type)
        if entry is None:
            return False
        self._entries.remove(entry)
        _log.debug("catalog remove type=%s", entry.type)
        return True


def default_catalog() -> Catalog:
    return Catalog(CatalogEntry(t, Decimal(p)) for t, p in DEFAULT_PRICES)


__all__ = [
    "Catalog",
    "TypeValidation",
    "UpsertResult",
    "DEFAULT_PRICES",
    "default_catalog",
    "normalize_type",
    "validate_type",
]
