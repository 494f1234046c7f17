"""Rental records kept in a comma-separated text file."""

from __future__ import annotations

import itertools
import os
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from rentaldesk.inventory import FirearmNotFoundError, InvalidQuantityError

DEFAULT_PATH = "transactions.txt"
FIRST_RECORD_ID = 1001

PENDING = "Pending"
RETURNED = "Returned"
EXPIRED = "Expired"


@dataclass
class Stock:
    """A firearm model with its total and currently available units."""

    firearm_id: str
    model: str
    total_quantity: int
    available_count: int


@dataclass
class RentalRecord:
    """One rental as stored in the records file."""

    transaction_id: int
    customer: str
    firearm_id: str
    firearm_model: str
    rental_date: str
    status: str = PENDING

    def to_line(self) -> str:
        """Return the record as one line of the records file, without newline."""
        return ",".join(
            [
                str(self.transaction_id),
                self.customer,
                self.firearm_id,
                self.firearm_model,
                self.rental_date,
                self.status,
            ]
        )


def default_stock() -> list[Stock]:
    """Return the stock the record book opens with."""
    return [
        Stock("1001", "Glock 17", 5, 5),
        Stock("1002", "M4 Carbine", 3, 3),
        Stock("1003", "Remington 870", 4, 4),
    ]


def load_records(path: str | os.PathLike[str] = DEFAULT_PATH) -> list[RentalRecord]:
    """Read records from ``path``; a missing file holds no records.

    Reading stops at the first line that does not start with a number.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except FileNotFoundError:
        return []

    records = []
    for line in lines:
        if not line.strip():
            continue
        head, _, rest = line.partition(",")
        try:
            transaction_id = int(head.strip())
        except ValueError:
            break
        fields = rest.split(",", 4)
        if len(fields) < 5:
            raise ValueError(f"Malformed record line: {line!r}")
        customer, firearm_id, model, rental_date, status = fields
        records.append(
            RentalRecord(transaction_id, customer, firearm_id, model, rental_date, status)
        )
    return records


def save_records(
    records: Iterable[RentalRecord], path: str | os.PathLike[str] = DEFAULT_PATH
) -> None:
    """Write ``records`` to ``path``, one per line, replacing its contents."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(record.to_line() + "\n" for record in records)


class RecordBook:
    """Records loaded from a file, with the stock they draw on."""

    def __init__(
        self,
        path: str | os.PathLike[str] = DEFAULT_PATH,
        stock: Iterable[Stock] | None = None,
    ) -> None:
        self.path = path
        self.stock = default_stock() if stock is None else list(stock)
        self.records = load_records(path)
        self._ids = itertools.count(FIRST_RECORD_ID)

    def _find(self, firearm_id: str) -> Stock:
        for item in self.stock:
            if item.firearm_id == firearm_id:
                return item
        raise FirearmNotFoundError(firearm_id)

    def add(self, customer: str, firearm_id: str, today: str | None = None) -> RentalRecord:
        """Rent one unit of a firearm to ``customer`` and record it as pending."""
        item = self._find(firearm_id)
        if item.available_count <= 0:
            raise InvalidQuantityError("No available units for this firearm")
        record = RentalRecord(
            transaction_id=next(self._ids),
            customer=customer,
            firearm_id=firearm_id,
            firearm_model=item.model,
            rental_date=today if today is not None else date.today().isoformat(),
            status=PENDING,
        )
        item.available_count -= 1
        self.records.append(record)
        return record

    def save(self) -> None:
        """Write all records back to the book's file."""
        save_records(self.records, self.path)