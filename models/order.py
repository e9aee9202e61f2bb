"""
models/order.py
---------------
Domain model for a checkout line item.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Order:
    """
    One line of a pending checkout.

    Attributes:
        meal: Name of the ordered dish (a copy, not a reference to a Meal row).
        price: Unit price at the time of ordering.
        image: Picture of the dish.
        plates: Number of plates ordered.
        total_cost: Line total. Not checked against price * plates.
        id: Database primary key (None until the order is inserted).
    """
    meal: str
    price: float
    image: str
    plates: int
    total_cost: float
    id: Optional[int] = None

    def __str__(self) -> str:
        ref = f"#{self.id}" if self.id is not None else "(new)"
        return f"{ref} {self.plates} x {self.meal} = {self.total_cost:.2f}"
