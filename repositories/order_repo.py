"""
repositories/order_repo.py
--------------------------
Data access layer for checkout line items.
All SQL queries related to the `orders` table live here.
"""

from typing import Optional

from db.errors import RowDecodeError
from models.order import Order
from repositories.base import BaseRepository, as_integer, as_number, as_text
from utils.logger import get_logger

logger = get_logger(__name__)


class OrderRepository(BaseRepository):
    """Repository for CRUD operations on the orders table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, order: Order) -> Order:
        """
        Insert a new order line.

        Args:
            order: The Order to persist. Any ``id`` already set is ignored.

        Returns:
            The same Order with its database-generated ``id`` populated.
        """
        sql = """
            INSERT INTO orders (meal, price, image, plates, totalcost)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING id;
        """
        order.id = self._execute(
            "create_order",
            sql,
            (order.meal, order.price, order.image, order.plates, order.total_cost),
            decode=self._returned_id,
        )
        logger.info(f"Added order #{order.id} ({order.plates} x {order.meal})")
        return order

    # ── READ ──────────────────────────────────────────────

    def get_all(self) -> list[Order]:
        """Return every order line, including its id."""
        sql = "SELECT id, meal, price, image, plates, totalcost FROM orders;"
        return self._fetch_all("get_orders", sql, self._row_to_order)

    # ── DELETE ────────────────────────────────────────────

    def delete_all(self) -> None:
        """Remove every order line. An empty table is not an error."""
        self._execute("delete_all_orders", "DELETE FROM orders;")
        logger.info("Cleared all orders")

    def delete(self, order_id: int) -> None:
        """Remove the order with the given id. An unknown id is not an error."""
        self._execute("delete_order", "DELETE FROM orders WHERE id = %s;", (order_id,))
        logger.info(f"Deleted order #{order_id}")

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _returned_id(row: Optional[tuple]) -> int:
        """Read the generated key from an ``INSERT ... RETURNING id`` row."""
        if row is None:
            raise RowDecodeError("create_order", row, "insert returned no id")
        try:
            return as_integer(row[0])
        except (TypeError, ValueError, IndexError) as e:
            raise RowDecodeError("create_order", row, str(e)) from e

    @staticmethod
    def _row_to_order(row: tuple) -> Order:
        """Convert a database row tuple to an Order domain object."""
        try:
            order_id, meal, price, image, plates, total_cost = row
            return Order(
                id=as_integer(order_id),
                meal=as_text(meal),
                price=as_number(price),
                image=as_text(image),
                plates=as_integer(plates),
                total_cost=as_number(total_cost),
            )
        except (TypeError, ValueError) as e:
            raise RowDecodeError("get_orders", row, str(e)) from e
