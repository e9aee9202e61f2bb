"""
store/postgres_store.py
-----------------------
RecordStore backed by PostgreSQL through a psycopg2 connection pool.
"""

from db.connection import close_pool
from models import Customer, Meal, Order
from repositories import CustomerRepository, MealRepository, OrderRepository


class PostgresRecordStore:
    """
    Database-backed record store.

    Holds nothing but the pool; each call borrows a connection, runs one
    statement and returns it. The pool is safe to share between threads.

    Usage:
        Build it once at startup from ``db.connection.create_pool()`` (or via
        ``store.factory.create_record_store``) and hand the instance to the
        request handlers. ``create_order`` returns the order with the id
        assigned by the database.
    """

    def __init__(self, db_pool):
        self.pool = db_pool
        self.meals = MealRepository(db_pool)
        self.orders = OrderRepository(db_pool)
        self.customers = CustomerRepository(db_pool)

    def create_meal(self, meal: Meal) -> None:
        self.meals.add(meal)

    def create_order(self, order: Order) -> Order:
        return self.orders.add(order)

    def create_customer(self, customer: Customer) -> None:
        self.customers.add(customer)

    def delete_all_orders(self) -> None:
        self.orders.delete_all()

    def delete_order(self, order_id: int) -> None:
        self.orders.delete(order_id)

    def get_meals(self) -> list[Meal]:
        return self.meals.get_all()

    def get_orders(self) -> list[Order]:
        return self.orders.get_all()

    def get_customers(self) -> list[Customer]:
        return self.customers.get_all()

    def close(self) -> None:
        """Close every pooled connection. The store is unusable afterwards."""
        close_pool(self.pool)
