"""Presentation-side glue between raw user text and the :class:`Ledger`.

``submit`` is the single entry point a view calls when the user presses
"Recycle Item": it parses the weight, builds a :class:`Transaction`, asks the
ledger to accept it and returns the line to display. Malformed weights never
reach the ledger.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from .config import Settings, load_catalog
from .errors import InvalidInput
from .ledger import Ledger
from .models import MAX_WEIGHT, Accepted, AcceptResult, Transaction, format_amount

INVALID_INPUT_MESSAGE = "Invalid Input"


def parse_weight(text: str) -> Decimal:
    """Parse user-entered weight text as a positive decimal no larger than ``MAX_WEIGHT``."""

    s = (text or "").strip()
    if not s:
        raise InvalidInput("weight is empty")
    try:
        d = Decimal(s)
    except InvalidOperation as exc:
        raise InvalidInput(f"invalid weight: {text!r}") from exc
    if not d.is_finite() or d <= 0:
        raise InvalidInput(f"weight must be a positive number: {text!r}")
    if d > MAX_WEIGHT:
        raise InvalidInput(f"weight must be at most {MAX_WEIGHT} lbs: {text!r}")
    return d


def describe(result: AcceptResult) -> str:
    """Render an accept result as a single display line."""

    if isinstance(result, Accepted):
        return f"Item Value: ${format_amount(result.price)}"
    if result.price is None:
        return f"Not accepted: unknown item type {result.transaction.type.strip()!r}"
    return (
        f"Not accepted: item value ${format_amount(result.price)} "
        "exceeds the cash available in this machine"
    )


def submit(ledger: Ledger, type_text: str, weight_text: str) -> str:
    try:
        weight = parse_weight(weight_text)
    except InvalidInput:
        return INVALID_INPUT_MESSAGE
    return describe(ledger.accept(Transaction(type_text, weight)))


def display(ledger: Ledger) -> str:
    return ledger.summarize()


def build_ledger(settings: Settings) -> Ledger:
    """Create a ledger for ``settings``, loading the catalog file when set."""

    catalog = load_catalog(settings.catalog_path) if settings.catalog_path else None
    return Ledger(settings.machine_id, settings.location, catalog=catalog)


__all__ = [
    "INVALID_INPUT_MESSAGE",
    "build_ledger",
    "describe",
    "display",
    "parse_weight",
    "submit",
]
