"""
models/ - Domain Records
========================
Plain dataclasses mirroring the rows of the meal, orders and customers tables.
"""

from models.customer import Customer
from models.meal import Meal
from models.order import Order

__all__ = ["Customer", "Meal", "Order"]
