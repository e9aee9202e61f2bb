"""
models/meal.py
--------------
Domain model for a menu item.
"""

from dataclasses import dataclass


@dataclass
class Meal:
    """
    A dish offered on the menu.

    Attributes:
        food: Name of the dish.
        price: Unit price of one plate.
        image: URL or path of the dish picture.
    """
    food: str
    price: float
    image: str

    def __str__(self) -> str:
        return f"{self.food} ({self.price:.2f})"
