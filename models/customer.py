"""
models/customer.py
------------------
Domain model for a customer captured at checkout.
"""

from dataclasses import dataclass


@dataclass
class Customer:
    """
    Delivery details recorded when a customer checks out.

    Attributes:
        name: Customer's name.
        address: Delivery address.
        meal: Summary of what was ordered.
        total_cost: Amount charged.
    """
    name: str
    address: str
    meal: str
    total_cost: float

    def __str__(self) -> str:
        return f"{self.name} | {self.address} | {self.meal} | {self.total_cost:.2f}"
