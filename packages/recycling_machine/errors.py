"""Exception types raised by the recycling machine."""

from __future__ import annotations

from decimal import Decimal

from .models import format_amount


class RecyclingMachineError(Exception):
    """Base class for all recycling machine failures."""


class UnknownItemType(RecyclingMachineError, LookupError):
    """The item type has no entry in the machine's catalog."""

    def __init__(self, item_type: str) -> None:
        super().__init__(f"Unknown item type: {item_type!r}")
        self.item_type = item_type


class InsufficientFunds(RecyclingMachineError):
    """The machine cannot pay out the value of an item."""

    def __init__(self, cash_balance: Decimal, price: Decimal) -> None:
        super().__init__(
            f"Insufficient funds: machine holds ${format_amount(cash_balance)}, "
            f"item value ${format_amount(price)}"
        )
        self.cash_balance = cash_balance
        self.price = price


class InvalidInput(RecyclingMachineError, ValueError):
    """User-entered text could not be parsed (presentation boundary only)."""


__all__ = [
    "RecyclingMachineError",
    "UnknownItemType",
    "InsufficientFunds",
    "InvalidInput",
]
