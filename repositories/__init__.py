"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific table.
Repositories receive raw rows from the database and return domain model objects.
"""

from repositories.customer_repo import CustomerRepository
from repositories.meal_repo import MealRepository
from repositories.order_repo import OrderRepository

__all__ = ["CustomerRepository", "MealRepository", "OrderRepository"]
