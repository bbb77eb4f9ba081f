"""Errors raised by the lot matching engine."""

from __future__ import annotations

from decimal import Decimal


class LotMatchingError(ValueError):
    """Base class for data-consistency errors found while matching lots."""


class InvalidTransactionError(LotMatchingError):
    """A transaction failed validation before matching started."""

    def __init__(self, transaction_id: str, reason: str):
        self.transaction_id = transaction_id
        self.reason = reason
        super().__init__(f"Transaction {transaction_id}: {reason}")


class OversoldError(LotMatchingError):
    """A sell needs more units than the open lots hold at that point in time."""

    def __init__(self, symbol: str, transaction_id: str, requested: Decimal, available: Decimal):
        self.symbol = symbol
        self.transaction_id = transaction_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"Sell {transaction_id} for {symbol} needs {requested} units "
            f"but only {available} are open"
        )


__all__ = ["LotMatchingError", "InvalidTransactionError", "OversoldError"]
