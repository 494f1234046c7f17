import pytest

from rentaldesk.inventory import (
    FirearmNotFoundError,
    InvalidQuantityError,
    Inventory,
    default_inventory,
)
from rentaldesk.ledger import (
    Ledger,
    LedgerFullError,
    Status,
    Transaction,
    render_transactions,
)

HEADER = "|| TID    | Firearm | Customer Name     | Qty |   Status   ||"


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock(100.0)


@pytest.fixture
def ledger(clock):
    return Ledger(default_inventory(), clock=clock)


def test_transaction_status_threshold():
    transaction = Transaction(1, "G17A", "Ann", 1, timestamp=10.0, rental_seconds=30)
    assert transaction.elapsed(25.0) == 15.0
    assert transaction.status(39.9) is Status.ONGOING
    assert transaction.status(40.0) is Status.EXPIRED


def test_status_values_match_display_text():
    transaction = Transaction(1, "G17A", "Ann", 1, timestamp=0.0, rental_seconds=30)
    assert transaction.status(0.0).value == "Ongoing"
    assert transaction.status(30.0).value == "Expired"


def test_add_assigns_sequential_ids_from_1000(ledger):
    first = ledger.add("G17A", "Ann", 1)
    second = ledger.add("R870", "Bob", 2)
    assert (first.id, second.id) == (1000, 1001)
    assert [t.id for t in ledger] == [1000, 1001]
    assert len(ledger) == 2


def test_add_records_details_and_reduces_stock(ledger, clock):
    transaction = ledger.add("AR15", "Carol", 3)
    assert transaction.firearm_id == "AR15"
    assert transaction.customer == "Carol"
    assert transaction.quantity == 3
    assert transaction.timestamp == clock.now
    assert transaction.returned is False
    assert ledger.inventory.find("AR15").quantity == 1


def test_add_unknown_firearm(ledger):
    with pytest.raises(FirearmNotFoundError):
        ledger.add("ZZZZ", "Ann", 1)
    assert len(ledger) == 0


def test_add_invalid_quantity_leaves_ledger_unchanged(ledger):
    with pytest.raises(InvalidQuantityError):
        ledger.add("R870", "Ann", 4)
    assert len(ledger) == 0
    assert ledger.inventory.find("R870").quantity == 3


def test_ledger_full(clock):
    ledger = Ledger(default_inventory(), capacity=2, clock=clock)
    ledger.add("G17A", "A", 1)
    ledger.add("G17A", "B", 1)
    with pytest.raises(LedgerFullError):
        ledger.add("G17A", "C", 1)
    assert ledger.inventory.find("G17A").quantity == 3


def test_review_returns_expired_stock_once(ledger, clock):
    ledger.add("G17A", "Ann", 2)
    assert [s for _, s in ledger.review()] == [Status.ONGOING]
    assert ledger.inventory.find("G17A").quantity == 3

    clock.now += 30
    assert [s for _, s in ledger.review()] == [Status.EXPIRED]
    assert ledger.inventory.find("G17A").quantity == 5

    ledger.review()
    assert ledger.inventory.find("G17A").quantity == 5
    assert next(iter(ledger)).returned is True


def test_review_orders(ledger):
    ledger.add("G17A", "Ann", 1)
    ledger.add("R870", "Bob", 1)
    ledger.add("AR15", "Cid", 1)
    oldest = [t.id for t, _ in ledger.review()]
    newest = [t.id for t, _ in ledger.review(newest_first=True)]
    assert newest == list(reversed(oldest))


def test_review_tolerates_missing_firearm(clock):
    inventory = default_inventory()
    ledger = Ledger(inventory, clock=clock)
    ledger.add("G17A", "Ann", 1)
    ledger.inventory = Inventory([])
    clock.now += 31
    reviewed = ledger.review()
    assert reviewed[0][1] is Status.EXPIRED
    assert reviewed[0][0].returned is True


def test_custom_rental_period(clock):
    ledger = Ledger(default_inventory(), rental_seconds=5, first_id=1, clock=clock)
    transaction = ledger.add("G17A", "Ann", 1)
    assert transaction.id == 1
    clock.now += 5
    assert ledger.review()[0][1] is Status.EXPIRED


def test_render_empty_ledger(ledger):
    text = render_transactions(ledger)
    assert "No transactions yet." in text
    assert HEADER not in text


def test_render_rows_align_and_show_status(ledger, clock):
    ledger.add("G17A", "Ann", 1)
    ledger.add("R870", "Bob", 2)
    lines = render_transactions(ledger).split("\n")
    start = lines.index(HEADER)
    rows = lines[start + 2 : start + 4]
    assert all(len(row) == len(HEADER) for row in rows)
    assert rows[0].startswith("|| 1000 ")
    assert "Ongoing" in rows[0] and "Ongoing" in rows[1]

    clock.now += 30
    expired = render_transactions(ledger).split("\n")
    assert "Expired" in expired[start + 2]


def test_render_newest_first(ledger):
    ledger.add("G17A", "Ann", 1)
    ledger.add("R870", "Bob", 1)
    lines = render_transactions(ledger, newest_first=True).split("\n")
    start = lines.index(HEADER)
    assert "Bob" in lines[start + 2]
    assert "Ann" in lines[start + 3]


def test_render_truncates_long_customer_name(ledger):
    name = "Bartholomew Fitzgerald"
    ledger.add("G17A", name, 1)
    text = render_transactions(ledger)
    assert name[:17] in text
    assert name not in text