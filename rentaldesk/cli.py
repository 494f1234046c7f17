"""Interactive menu for the firearm rental desk."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from rentaldesk.inventory import (
    FirearmNotFoundError,
    InvalidQuantityError,
    default_inventory,
    render_inventory,
)
from rentaldesk.ledger import RENTAL_SECONDS, Ledger, render_transactions

_BOX_RULE = "=" * 38
_PROMPT_RULE = "=" * 40
_LIST_RULE = "=" * 61
_CLEAR = "\033[2J\033[H"

_MENU_LINES = [
    _BOX_RULE,
    "||      FIREARM RENTAL SYSTEM       ||",
    _BOX_RULE,
    "||  1.) View Available Firearms     ||",
    "||  2.) Add Transaction             ||",
    "||  3.) Update Transaction          ||",
    "||  4.) Display Transaction List    ||",
    "||  5.) Transaction Search          ||",
    "||  6.) Exit                        ||",
    _BOX_RULE,
]


def render_menu() -> str:
    """Return the main menu as text."""
    return "\n".join(_MENU_LINES) + "\n\n"


class _Session:
    def __init__(self, ledger: Ledger, stdin: TextIO, stdout: TextIO) -> None:
        self.ledger = ledger
        self.stdin = stdin
        self.stdout = stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def read(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def clear(self) -> None:
        isatty = getattr(self.stdout, "isatty", None)
        if isatty is not None and isatty():
            self.write(_CLEAR)

    def pause(self) -> None:
        self.write("Press Enter to continue . . . ")
        self.read()

    def back_to_menu(self, leading: str = "") -> None:
        self.write(f"{leading}Press Enter to return to the main menu...")
        self.read()

    def run(self) -> None:
        actions = {1: self.view_firearms, 2: self.add_transaction, 4: self.show_transactions}
        try:
            while True:
                self.clear()
                self.write(render_menu())
                self.write(f"{_PROMPT_RULE}\n\n")
                self.write("Select an option: ")
                try:
                    choice = int(self.read().strip())
                except ValueError:
                    continue
                if choice == 6:
                    self.write("\nExiting...")
                    return
                action = actions.get(choice)
                if action is not None:
                    action()
        except EOFError:
            return

    def view_firearms(self) -> None:
        self.clear()
        self.write("\n" + render_inventory(self.ledger.inventory))
        self.back_to_menu("\n")

    def _fail(self, message: str) -> None:
        self.write(f"{message}\n{_BOX_RULE}\n")
        self.pause()

    def add_transaction(self) -> None:
        self.clear()
        self.write(f"{_BOX_RULE}\n||         ADD TRANSACTION          ||\n{_BOX_RULE}\n")
        if len(self.ledger) >= self.ledger.capacity:
            self._fail("||  Transaction queue is full!      ||")
            return
        self.write("|| Enter Firearm ID: ")
        tokens = self.read().split()
        firearm_id = tokens[0] if tokens else ""
        try:
            self.ledger.inventory.find(firearm_id)
        except FirearmNotFoundError:
            self._fail("||  Firearm not found!              ||")
            return
        self.write("|| Enter Customer Name: ")
        customer = self.read()
        self.write("|| Enter Quantity to Rent: ")
        try:
            quantity = int(self.read().strip())
        except ValueError:
            quantity = 0
        try:
            self.ledger.add(firearm_id, customer, quantity)
        except InvalidQuantityError:
            self._fail("||  Invalid quantity!               ||")
            return
        self.write(f"||  Transaction added successfully! ||\n{_BOX_RULE}\n")
        self.pause()

    def show_transactions(self) -> None:
        self.clear()
        newest_first = False
        if len(self.ledger):
            self.write(
                "|| Display Order:                                          ||\n"
                "||  1. Oldest to Newest                                    ||\n"
                "||  2. Newest to Oldest                                    ||\n"
                f"{_LIST_RULE}\n"
                "Enter choice (1 or 2): "
            )
            newest_first = self.read().strip() == "2"
        self.write(render_transactions(self.ledger, newest_first))
        self.back_to_menu()


def run_session(ledger: Ledger, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Run the menu loop until the user exits or input runs out."""
    _Session(
        ledger,
        sys.stdin if stdin is None else stdin,
        sys.stdout if stdout is None else stdout,
    ).run()


def main(argv: list[str] | None = None) -> int:
    """Start the rental desk on standard input and output."""
    parser = argparse.ArgumentParser(prog="rentaldesk", description="Firearm rental desk")
    parser.add_argument(
        "--rental-seconds",
        type=float,
        default=RENTAL_SECONDS,
        help="seconds before a rental expires (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    ledger = Ledger(default_inventory(), rental_seconds=args.rental_seconds)
    run_session(ledger, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())