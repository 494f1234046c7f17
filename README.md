# rentaldesk

A small firearm rental desk for the shop counter. It tracks a fixed set
of firearms, records rentals in a bounded ledger and puts units back in
stock once a rental has run past its time.

## Install

    pip install .

For the test suite:

    pip install ".[test]"
    pytest

## Running the desk

    rentaldesk

or, with a different rental period (in seconds, default 30):

    rentaldesk --rental-seconds 120

The desk starts with three firearms in stock: `G17A` (Glock 17, 5 units),
`R870` (Remington 870, 3 units) and `AR15` (AR-15, 4 units). The menu
offers:

1. View Available Firearms: a table of ID, model, caliber and quantity.
2. Add Transaction: enter a firearm ID, a customer name and a quantity.
   An unknown ID, a quantity of zero or less (or one that is not a
   number), a quantity above what is in stock, or a full ledger
   (20 transactions) turns the request down.
3. Update Transaction: listed, but choosing it does nothing.
4. Display Transaction List: asks whether to list oldest or newest
   first, then shows each rental's ID (numbered from 1000), firearm,
   customer (first 17 characters), quantity and status. A rental is
   **Ongoing** until its rental period has passed, then **Expired**; the
   first time an expired rental is listed, its units go back into stock.
5. Transaction Search: listed, but choosing it does nothing.
6. Exit.

The session also ends when standard input runs out. When the output is a
terminal, the screen is cleared before each page.

## Using it as a library

```python
import time

from rentaldesk.inventory import default_inventory, render_inventory
from rentaldesk.ledger import Ledger, render_transactions

inventory = default_inventory()
ledger = Ledger(inventory, capacity=20, first_id=1000,
                rental_seconds=30, clock=time.time)
ledger.add("G17A", "Jane Doe", 2)

print(render_inventory(inventory))
print(render_transactions(ledger, newest_first=False))
```

- `Inventory` holds at most 10 `Firearm` entries. `Inventory.find`,
  `Inventory.rent` and `Inventory.restock` raise `FirearmNotFoundError`
  for an unknown ID; `rent` and `restock` raise `InvalidQuantityError`
  for a quantity they cannot meet.
- `Ledger.add` raises `LedgerFullError` when the ledger is at capacity.
- `Ledger.review(newest_first)` returns each `Transaction` paired with
  its `Status` (`Status.ONGOING` or `Status.EXPIRED`) and puts the stock
  of newly expired rentals back.
- `rentaldesk.cli.run_session(ledger, stdin, stdout)` runs the menu on
  any pair of text streams; `render_menu()` returns the menu text.

### Rental records on disk

`rentaldesk.records` keeps one rental per line in a comma-separated text
file (`transactions.txt` by default), with fields transaction ID,
customer, firearm ID, model, rental date and status:

```python
from rentaldesk.records import RecordBook, default_stock

book = RecordBook("transactions.txt", default_stock())
book.add("Jane Doe", "1001", today="2024-01-31")
book.save()
```

`RecordBook.add` rents one unit against its own `Stock` list (IDs
`1001`, `1002`, `1003`), records it with status `Pending` and the given
date (today's date if none is given), and raises `FirearmNotFoundError`
or `InvalidQuantityError` when it cannot. New record IDs start at 1001
each time a book is opened. `load_records(path)` returns no records for
a missing file, stops at the first line that does not start with a
number, and raises `ValueError` for a line with too few fields.
`save_records(records, path)` replaces the file's contents.

## What it does not do

- The terminal desk keeps everything in memory: its ledger and stock
  are lost on exit, and it does not use the record file.
- Transactions cannot be updated or searched; those menu entries do
  nothing.
- Nothing changes a record's status after it is added; `Returned` and
  `Expired` exist only as values a record file may hold.