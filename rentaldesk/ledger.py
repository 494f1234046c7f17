"""Rental transactions and their expiry."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator

from rentaldesk.inventory import FirearmNotFoundError, Inventory

MAX_TRANSACTIONS = 20
FIRST_TRANSACTION_ID = 1000
RENTAL_SECONDS = 30.0

_LIST_RULE_TOP = "=" * 61
_LIST_RULE_BOTTOM = "=" * 62
_LIST_TITLE = "||                   TRANSACTION LIST                      ||"
_LIST_EMPTY = "||                No transactions yet.                      ||"
_LIST_HEADER = "|| TID    | Firearm | Customer Name     | Qty |   Status   ||"
_LIST_SEPARATOR = "||--------|---------|-------------------|-----|------------||"


class Status(Enum):
    """State of a rental at a given moment."""

    ONGOING = "Ongoing"
    EXPIRED = "Expired"


@dataclass
class Transaction:
    """One rental of a number of units of a firearm."""

    id: int
    firearm_id: str
    customer: str
    quantity: int
    timestamp: float
    rental_seconds: float = RENTAL_SECONDS
    returned: bool = False

    def elapsed(self, now: float) -> float:
        """Seconds since the rental was made."""
        return now - self.timestamp

    def status(self, now: float) -> Status:
        """Whether the rental period has run out at ``now``."""
        if self.elapsed(now) >= self.rental_seconds:
            return Status.EXPIRED
        return Status.ONGOING


class LedgerFullError(RuntimeError):
    """Raised when the ledger holds as many transactions as it can."""


class Ledger:
    """Transactions in the order they were made, tied to an inventory."""

    def __init__(
        self,
        inventory: Inventory,
        capacity: int = MAX_TRANSACTIONS,
        first_id: int = FIRST_TRANSACTION_ID,
        rental_seconds: float = RENTAL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.inventory = inventory
        self.capacity = capacity
        self.rental_seconds = rental_seconds
        self._clock = clock
        self._next_id = first_id
        self._transactions: list[Transaction] = []

    def add(self, firearm_id: str, customer: str, quantity: int) -> Transaction:
        """Rent out firearms and record the transaction."""
        if len(self._transactions) >= self.capacity:
            raise LedgerFullError("Transaction queue is full")
        self.inventory.rent(firearm_id, quantity)
        transaction = Transaction(
            id=self._next_id,
            firearm_id=firearm_id,
            customer=customer,
            quantity=quantity,
            timestamp=self._clock(),
            rental_seconds=self.rental_seconds,
        )
        self._next_id += 1
        self._transactions.append(transaction)
        return transaction

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    def review(self, newest_first: bool = False) -> list[tuple[Transaction, Status]]:
        """Return each transaction with its status, returning expired units to stock."""
        ordered = reversed(self._transactions) if newest_first else self._transactions
        reviewed = []
        for transaction in ordered:
            status = transaction.status(self._clock())
            if status is Status.EXPIRED and not transaction.returned:
                try:
                    self.inventory.restock(transaction.firearm_id, transaction.quantity)
                except FirearmNotFoundError:
                    pass
                transaction.returned = True
            reviewed.append((transaction, status))
        return reviewed


def render_transactions(ledger: Ledger, newest_first: bool = False) -> str:
    """Render the transaction list as text, reviewing expiries as it goes."""
    lines = [_LIST_RULE_TOP, _LIST_TITLE, _LIST_RULE_TOP]
    if not len(ledger):
        lines.append(_LIST_EMPTY)
    else:
        lines.extend([_LIST_HEADER, _LIST_SEPARATOR])
        lines.extend(
            f"|| {transaction.id:<6} | {transaction.firearm_id:<7} | "
            f"{transaction.customer[:17]:<17} | {transaction.quantity:<3} | "
            f"{status.value:<11}||"
            for transaction, status in ledger.review(newest_first)
        )
    lines.append(_LIST_RULE_BOTTOM)
    return "\n".join(lines) + "\n"