"""
repositories/meal_repo.py
-------------------------
Data access layer for menu items.
All SQL queries related to the `meal` table live here.
"""

from db.errors import RowDecodeError
from models.meal import Meal
from repositories.base import BaseRepository, as_number, as_text
from utils.logger import get_logger

logger = get_logger(__name__)


class MealRepository(BaseRepository):
    """Repository for insert and list operations on the meal table."""

    def add(self, meal: Meal) -> None:
        """Insert one meal. Meals have no generated key."""
        sql = "INSERT INTO meal (food, price, image) VALUES (%s, %s, %s);"
        self._execute("create_meal", sql, (meal.food, meal.price, meal.image))
        logger.info(f"Added meal '{meal.food}'")

    def get_all(self) -> list[Meal]:
        """Return every meal, in whatever order the database yields them."""
        sql = "SELECT food, price, image FROM meal;"
        return self._fetch_all("get_meals", sql, self._row_to_meal)

    @staticmethod
    def _row_to_meal(row: tuple) -> Meal:
        """Convert a database row tuple to a Meal domain object."""
        try:
            food, price, image = row
            return Meal(food=as_text(food), price=as_number(price), image=as_text(image))
        except (TypeError, ValueError) as e:
            raise RowDecodeError("get_meals", row, str(e)) from e
