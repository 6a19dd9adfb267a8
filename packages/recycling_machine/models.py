"""Data models and result types for ``recycling_machine``.

Money and weights are carried as :class:`decimal.Decimal` throughout so that
prices such as ``2.0 lbs * 1.8`` come out as exactly ``3.60``. Display helpers
quantize to two places with ``ROUND_HALF_UP``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from pydantic import BaseModel, ConfigDict, field_validator

# ---------------------------------------------------------------------------
# Decimal helpers
# ---------------------------------------------------------------------------

_CENTS = Decimal("0.01")

# Upper bounds keep every price (weight * price_per_weight) well inside the
# default decimal context, so pricing and display never trap.
MAX_WEIGHT = Decimal("1000")
MAX_PRICE_PER_WEIGHT = Decimal("1000")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce ``value`` to ``Decimal``; floats go through ``str`` to keep 1.8 == 1.8."""

    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("booleans are not valid amounts")
    if isinstance(value, float):
        value = repr(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError) as exc:
        raise ValueError(f"invalid decimal value: {value!r}") from exc


def format_amount(d: Decimal) -> str:
    # Exactly two decimals; ASCII dot. Amounts too large to quantize print as-is.
    try:
        return f"{d.quantize(_CENTS, rounding=ROUND_HALF_UP):.2f}"
    except InvalidOperation:
        return str(d)


def _require_in_range(name: str, value: Decimal, upper: Decimal) -> None:
    if not value.is_finite() or value <= 0:
        raise ValueError(f"{name} must be a positive finite number, got {value!r}")
    if value > upper:
        raise ValueError(f"{name} must be at most {upper}, got {value!r}")


# ---------------------------------------------------------------------------
# Core records
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class CatalogEntry:
    """An accepted item type and the price paid per pound.

    ``type`` is expected in normalized form (see
    :func:`recycling_machine.catalog.normalize_type`); the catalog normalizes
    on insert. ``price_per_weight`` is mutable so upserts update in place.
    """

    type: str
    price_per_weight: Decimal

    def __post_init__(self) -> None:
        self.price_per_weight = to_decimal(self.price_per_weight)
        _require_in_range("price_per_weight", self.price_per_weight, MAX_PRICE_PER_WEIGHT)


@dataclass(frozen=True, slots=True)
class Transaction:
    """One recycling event: the item type as entered and its weight in pounds."""

    type: str
    weight: Decimal

    def __post_init__(self) -> None:
        weight = to_decimal(self.weight)
        _require_in_range("weight", weight, MAX_WEIGHT)
        # Frozen dataclass: assign the coerced value through object.__setattr__.
        object.__setattr__(self, "weight", weight)

    def __str__(self) -> str:
        return f"{self.type.strip()} {format_amount(self.weight)} lbs"


# ---------------------------------------------------------------------------
# Accept results
# ---------------------------------------------------------------------------


class RejectionReason(enum.Enum):
    UNKNOWN_ITEM_TYPE = "unknown_item_type"
    INSUFFICIENT_FUNDS = "insufficient_funds"


@dataclass(frozen=True, slots=True)
class Accepted:
    """The machine took the item and paid out ``price``."""

    transaction: Transaction
    price: Decimal

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Rejected:
    """The machine refused the item; no ledger state changed.

    ``price`` is the computed value of the item. It is required for
    ``INSUFFICIENT_FUNDS`` and is ``None`` when the type was not in the catalog.
    """

    transaction: Transaction
    reason: RejectionReason
    price: Decimal | None = None

    def __post_init__(self) -> None:
        if self.reason is RejectionReason.INSUFFICIENT_FUNDS and self.price is None:
            raise ValueError("an insufficient-funds rejection must carry the item price")

    @property
    def ok(self) -> bool:
        return False


AcceptResult = Accepted | Rejected
"""Outcome of :meth:`recycling_machine.ledger.Ledger.accept`."""


# ---------------------------------------------------------------------------
# Catalog file schema
# ---------------------------------------------------------------------------


class CatalogFileEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    type: str
    price_per_weight: Decimal

    @field_validator("type")
    @classmethod
    def _type_non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("type must be non-empty")
        return v

    @field_validator("price_per_weight")
    @classmethod
    def _price_positive(cls, v: Decimal) -> Decimal:
        if not v.is_finite() or v <= 0:
            raise ValueError("price_per_weight must be positive")
        if v > MAX_PRICE_PER_WEIGHT:
            raise ValueError(f"price_per_weight must be at most {MAX_PRICE_PER_WEIGHT}")
        return v


class CatalogFile(BaseModel):
    """Top-level schema for a JSON catalog file.

    Example::

        {"entries": [{"type": "glass", "price_per_weight": 1.8}]}
    """

    model_config = ConfigDict(extra="forbid")

    entries: list[CatalogFileEntry]


__all__ = [
    "CatalogEntry",
    "Transaction",
    "RejectionReason",
    "Accepted",
    "Rejected",
    "AcceptResult",
    "CatalogFile",
    "CatalogFileEntry",
    "format_amount",
    "MAX_WEIGHT",
    "MAX_PRICE_PER_WEIGHT",
    "to_decimal",
]
