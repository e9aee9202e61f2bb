"""
store/base.py
-------------
Record store port (interface).

Request handlers depend on this protocol only, so the database-backed
store and the in-memory double are interchangeable.
"""

from typing import Protocol

from models import Customer, Meal, Order


class RecordStore(Protocol):
    """
    Create/read/delete operations for meals, orders and customers.

    Every method is one round trip to the backing store and raises
    ``PersistenceError`` on failure. Read methods return a new list,
    empty when there is nothing stored.
    """

    def create_meal(self, meal: Meal) -> None:
        ...

    def create_order(self, order: Order) -> Order:
        """Persist an order and return it with its generated ``id`` set."""
        ...

    def create_customer(self, customer: Customer) -> None:
        ...

    def delete_all_orders(self) -> None:
        ...

    def delete_order(self, order_id: int) -> None:
        ...

    def get_meals(self) -> list[Meal]:
        ...

    def get_orders(self) -> list[Order]:
        ...

    def get_customers(self) -> list[Customer]:
        ...
