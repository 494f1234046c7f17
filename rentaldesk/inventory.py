"""Firearm stock kept by the rental desk."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

MAX_FIREARMS = 10

_TABLE_RULE = "=" * 58
_TABLE_TITLE = "||           AVAILABLE FIREARMS                         ||"
_TABLE_HEADER = "|| ID   | Model               | Caliber      | Quantity ||"
_TABLE_SEPARATOR = "||------|---------------------|--------------|----------||"


@dataclass
class Firearm:
    """One firearm model and the number of units on hand."""

    id: str
    model: str
    caliber: str
    quantity: int


class FirearmNotFoundError(LookupError):
    """Raised when no firearm has the requested id."""

    def __init__(self, firearm_id: str) -> None:
        super().__init__(f"Firearm not found: {firearm_id!r}")
        self.firearm_id = firearm_id


class InvalidQuantityError(ValueError):
    """Raised when a quantity is not positive or exceeds what is on hand."""


class Inventory:
    """An ordered collection of firearms that can be rented out and restocked."""

    def __init__(self, firearms: Iterable[Firearm] = ()) -> None:
        self._firearms = list(firearms)
        if len(self._firearms) > MAX_FIREARMS:
            raise ValueError(
                f"An inventory holds at most {MAX_FIREARMS} firearms"
            )

    def find(self, firearm_id: str) -> Firearm:
        """Return the firearm with the given id."""
        for firearm in self._firearms:
            if firearm.id == firearm_id:
                return firearm
        raise FirearmNotFoundError(firearm_id)

    def rent(self, firearm_id: str, quantity: int) -> Firearm:
        """Take ``quantity`` units of a firearm out of stock."""
        firearm = self.find(firearm_id)
        if quantity <= 0 or quantity > firearm.quantity:
            raise InvalidQuantityError(
                f"Invalid quantity {quantity} for {firearm_id!r} "
                f"({firearm.quantity} available)"
            )
        firearm.quantity -= quantity
        return firearm

    def restock(self, firearm_id: str, quantity: int) -> Firearm:
        """Put ``quantity`` units of a firearm back into stock."""
        firearm = self.find(firearm_id)
        if quantity <= 0:
            raise InvalidQuantityError(f"Invalid quantity {quantity}")
        firearm.quantity += quantity
        return firearm

    def __iter__(self) -> Iterator[Firearm]:
        return iter(self._firearms)

    def __len__(self) -> int:
        return len(self._firearms)


def default_inventory() -> Inventory:
    """Return the stock the desk opens with."""
    return Inventory(
        [
            Firearm("G17A", "Glock 17", "9mm Pistol", 5),
            Firearm("R870", "Remington 870", "12ga Shotgun", 3),
            Firearm("AR15", "AR-15", "5.56mm Rifle", 4),
        ]
    )


def render_inventory(inventory: Inventory) -> str:
    """Render the available-firearms table as text."""
    lines = [_TABLE_RULE, _TABLE_TITLE, _TABLE_RULE, _TABLE_HEADER, _TABLE_SEPARATOR]
    lines.extend(
        f"|| {firearm.id} | {firearm.model.ljust(20)}| "
        f"{firearm.caliber.ljust(13)}|    {firearm.quantity}     ||"
        for firearm in inventory
    )
    lines.append(_TABLE_RULE)
    return "\n".join(lines) + "\n"