"""
store/in_memory_store.py
------------------------
In-memory RecordStore for tests and local development.

Stores copies of the records in plain lists, so callers can never mutate
what is stored. Order ids come from a counter starting at 1, mirroring a
database sequence.

Thread safety: NOT thread-safe.
Persistence: data is lost when the process exits.
"""

from copy import deepcopy
from itertools import count

from models import Customer, Meal, Order
from utils.logger import get_logger

logger = get_logger(__name__)


class InMemoryRecordStore:
    """Dictionary/list backed implementation of the RecordStore protocol."""

    def __init__(self) -> None:
        self._meals: list[Meal] = []
        self._orders: dict[int, Order] = {}
        self._customers: list[Customer] = []
        self._next_id = count(1)

    def create_meal(self, meal: Meal) -> None:
        self._meals.append(deepcopy(meal))

    def create_order(self, order: Order) -> Order:
        order.id = next(self._next_id)
        self._orders[order.id] = deepcopy(order)
        logger.debug(f"Stored order #{order.id} in memory")
        return order

    def create_customer(self, customer: Customer) -> None:
        self._customers.append(deepcopy(customer))

    def delete_all_orders(self) -> None:
        self._orders.clear()

    def delete_order(self, order_id: int) -> None:
        self._orders.pop(order_id, None)

    def get_meals(self) -> list[Meal]:
        return deepcopy(self._meals)

    def get_orders(self) -> list[Order]:
        return deepcopy(list(self._orders.values()))

    def get_customers(self) -> list[Customer]:
        return deepcopy(self._customers)
