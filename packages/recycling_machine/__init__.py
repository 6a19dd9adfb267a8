"""Public interface for the ``recycling_machine`` package.

This module exposes the ledger, catalog and result types as the stable import
surface. There is no runtime logic here, only symbol re-exports.
"""

from .catalog import Catalog, UpsertResult, default_catalog, normalize_type, validate_type
from .errors import InsufficientFunds, InvalidInput, RecyclingMachineError, UnknownItemType
from .ledger import TOTAL_CASH, Ledger
from .machine import display, parse_weight, submit
from .models import (
    Accepted,
    AcceptResult,
    CatalogEntry,
    Rejected,
    RejectionReason,
    Transaction,
)

__all__ = [
    # Ledger / catalog
    "Ledger",
    "TOTAL_CASH",
    "Catalog",
    "UpsertResult",
    "default_catalog",
    "normalize_type",
    "validate_type",
    # Presentation helpers
    "submit",
    "display",
    "parse_weight",
    # Models / types
    "CatalogEntry",
    "Transaction",
    "Accepted",
    "Rejected",
    "RejectionReason",
    "AcceptResult",
    # Errors
    "RecyclingMachineError",
    "UnknownItemType",
    "InsufficientFunds",
    "InvalidInput",
]
