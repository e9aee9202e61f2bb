"""
repositories/customer_repo.py
-----------------------------
Data access layer for customer checkout records.
"""

from db.errors import RowDecodeError
from models.customer import Customer
from repositories.base import BaseRepository, as_number, as_text
from utils.logger import get_logger

logger = get_logger(__name__)


class CustomerRepository(BaseRepository):
    """Repository for insert and list operations on the customers table."""

    def add(self, customer: Customer) -> None:
        sql = """
            INSERT INTO customers (customer_name, location_address, meal, totalcost)
            VALUES (%s, %s, %s, %s);
        """
        self._execute(
            "create_customer",
            sql,
            (customer.name, customer.address, customer.meal, customer.total_cost),
        )
        logger.info(f"Added customer '{customer.name}'")

    def get_all(self) -> list[Customer]:
        sql = "SELECT customer_name, location_address, meal, totalcost FROM customers;"
        return self._fetch_all("get_customers", sql, self._row_to_customer)

    @staticmethod
    def _row_to_customer(row: tuple) -> Customer:
        try:
            name, address, meal, total_cost = row
            return Customer(
                name=as_text(name),
                address=as_text(address),
                meal=as_text(meal),
                total_cost=as_number(total_cost),
            )
        except (TypeError, ValueError) as e:
            raise RowDecodeError("get_customers", row, str(e)) from e
