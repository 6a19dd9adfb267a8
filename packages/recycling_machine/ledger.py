"""Pricing and cash/weight bookkeeping for a single recycling machine.

The :class:`Ledger` is the aggregate root: it owns the catalog, the cash pool,
the cumulative weight and the log of accepted transactions. It has no view
dependency; presentation code holds a reference and calls into it.

Invariants
----------
- ``cumulative_weight`` always equals the sum of ``transactions`` weights.
- ``accept`` never drives ``cash_balance`` below zero; it rejects instead.
"""

from __future__ import annotations

from decimal import Decimal

from .catalog import Catalog, default_catalog
from .errors import InsufficientFunds, UnknownItemType
from .logging_setup import get_logger
from .models import (
    Accepted,
    AcceptResult,
    Rejected,
    RejectionReason,
    Transaction,
    format_amount,
)

_log = get_logger("recycling_machine.ledger")

TOTAL_CASH = Decimal("200.00")


class Ledger:
    def __init__(
        self,
        machine_id: str,
        location: str,
        *,
        catalog: Catalog | None = None,
    ) -> None:
        self.machine_id = machine_id
        self.location = location
        self.catalog = catalog if catalog is not None else default_catalog()
        self.cash_balance = TOTAL_CASH
        self.cumulative_weight = Decimal("0")
        self._transactions: list[Transaction] = []

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    # ---- pricing ---------------------------------------------------------

    def price_of(self, transaction: Transaction) -> Decimal:
        """Return ``weight * price_per_weight`` for the transaction's type.

        Raises :class:`UnknownItemType` when the catalog has no such type.
        """

        entry = self.catalog.lookup(transaction.type)
        if entry is None:
            raise UnknownItemType(transaction.type)
        return transaction.weight * entry.price_per_weight

    def accept(self, transaction: Transaction) -> AcceptResult:
        """Pay out for ``transaction`` and record it, or reject with no change.

        Cash exactly equal to the price counts as insufficient.
        """

        try:
            price = self.price_of(transaction)
        except UnknownItemType:
            _log.warning("rejected %s: unknown item type", transaction)
            return Rejected(transaction, RejectionReason.UNKNOWN_ITEM_TYPE)

        if not self.cash_balance > price:
            _log.warning(
                "rejected %s: value $%s exceeds cash $%s",
                transaction,
                price,
                self.cash_balance,
            )
            return Rejected(transaction, RejectionReason.INSUFFICIENT_FUNDS, price)

        self.cash_balance -= price
        self._transactions.append(transaction)
        self.cumulative_weight += transaction.weight
        _log.info(
            "accepted %s for $%s; cash now $%s",
            transaction,
            price,
            self.cash_balance,
        )
        return Accepted(transaction, price)

    def require_accepted(self, transaction: Transaction) -> Accepted:
        """Like :meth:`accept`, but raise on rejection."""

        result = self.accept(transaction)
        if isinstance(result, Accepted):
            return result
        if result.price is None:
            raise UnknownItemType(transaction.type)
        raise InsufficientFunds(self.cash_balance, result.price)

    def recycle(self, *transactions: Transaction) -> list[AcceptResult]:
        """Accept each transaction in order; one result per input."""

        return [self.accept(t) for t in transactions]

    # ---- maintenance -----------------------------------------------------

    def restock(self) -> None:
        """Replace the cash balance with the fixed starting amount."""

        self.cash_balance = TOTAL_CASH
        _log.info("restocked machine %s to $%s", self.machine_id, TOTAL_CASH)

    def reset(self) -> None:
        """Empty the machine: drop recorded transactions and zero the weight."""

        count = len(self._transactions)
        self._transactions.clear()
        self.cumulative_weight = Decimal("0")
        _log.info("emptied machine %s (%d transactions cleared)", self.machine_id, count)

    # ---- display ---------------------------------------------------------

    def summarize(self) -> str:
        return (
            f"{self.machine_id} {self.location} ${format_amount(self.cash_balance)}"
            f"  {format_amount(self.cumulative_weight)} lbs"
        )

    def format_transactions(self) -> list[str]:
        return [str(t) for t in self._transactions]

    def __str__(self) -> str:
        return self.summarize()


__all__ = ["Ledger", "TOTAL_CASH"]
