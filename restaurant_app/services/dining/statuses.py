"""Table and order status enumerations."""
from enum import Enum


class TableStatus(str, Enum):
    """Seating states a table can be in."""

    FREE = "libre"
    OCCUPIED = "ocupada"
    RESERVED = "reservada"

    def __str__(self) -> str:
        """Return the string value of the status."""
        return self.value


class OrderStatus(str, Enum):
    """Kitchen states of an order."""

    PENDING = "pendiente"
    SERVED = "servido"

    def __str__(self) -> str:
        """Return the string value of the status."""
        return self.value
