"""Dining room models: dishes, orders and tables."""
from typing import Annotated, Any, List

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from restaurant_app.core import config
from restaurant_app.services.dining.constants import (
    DISH_NAME_BLANK,
    DISH_PREP_TIME_TOO_SHORT,
    DISH_PRICE_NOT_POSITIVE,
    FIELD_NOT_NUMERIC,
    INGREDIENT_BLANK,
    MAX_TABLE_CAPACITY,
    MIN_PREP_TIME_EXCLUSIVE,
    MIN_TABLE_CAPACITY,
    TABLE_CAPACITY_OUT_OF_RANGE,
)
from restaurant_app.services.dining.statuses import OrderStatus, TableStatus

__all__ = ["Dish", "Order", "Table", "ValidationError"]


def _check_ingredient(value: str) -> str:
    if not value.strip():
        raise ValueError(INGREDIENT_BLANK)
    return value


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError(FIELD_NOT_NUMERIC)
    return value


Ingredient = Annotated[str, AfterValidator(_check_ingredient)]
NumericFloat = Annotated[float, BeforeValidator(_reject_bool)]
NumericInt = Annotated[int, BeforeValidator(_reject_bool)]

_ingredient_adapter = TypeAdapter(Ingredient)


class Dish(BaseModel):
    """Menu dish with price, preparation time and ingredients."""

    model_config = ConfigDict(validate_assignment=True)

    name: str
    price: NumericFloat
    prep_time: NumericInt  # Minutes
    ingredients: List[Ingredient] = []

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError(DISH_NAME_BLANK)
        return value

    @field_validator("price")
    @classmethod
    def price_positive(cls, value: float) -> float:
        if not value > 0:
            raise ValueError(DISH_PRICE_NOT_POSITIVE)
        return value

    @field_validator("prep_time")
    @classmethod
    def prep_time_long_enough(cls, value: int) -> int:
        if value <= MIN_PREP_TIME_EXCLUSIVE:
            raise ValueError(DISH_PREP_TIME_TOO_SHORT)
        return value

    def add_ingredient(self, ingredient: str) -> None:
        """
        Append an ingredient to the dish.

        Raises:
            ValidationError: If the ingredient is blank
        """
        self.ingredients.append(_ingredient_adapter.validate_python(ingredient))

    def __str__(self) -> str:
        ingredients = ", ".join(self.ingredients)
        currency = config.settings.currency_symbol
        return f"{self.name} ({self.prep_time} min.) -> {self.price:.2f}{currency} ({ingredients})"


class Order(BaseModel):
    """Group of dishes ordered together at a table."""

    model_config = ConfigDict(validate_assignment=True)

    id: int
    dishes: List[Dish] = []
    status: OrderStatus = OrderStatus.PENDING

    def add_dish(self, dish: Dish) -> None:
        """Add a dish to the order. Duplicates are allowed."""
        self.dishes.append(dish)

    def remove_dish(self, dish_name: str) -> None:
        """Remove every dish with the given name."""
        self.dishes[:] = [dish for dish in self.dishes if dish.name != dish_name]

    def total_price(self) -> float:
        """Get the sum of all dish prices."""
        return sum(dish.price for dish in self.dishes)

    def total_prep_time(self) -> int:
        """Get the sum of all dish preparation times."""
        return sum(dish.prep_time for dish in self.dishes)

    def __str__(self) -> str:
        dishes = "\n".join(str(dish) for dish in self.dishes)
        return f"Pedido: {self.id} ({self.status.value}):{dishes}"


class Table(BaseModel):
    """Restaurant table with its seating status and orders."""

    model_config = ConfigDict(validate_assignment=True)

    id: int
    capacity: NumericInt
    status: TableStatus = TableStatus.FREE
    orders: List[Order] = []

    @field_validator("capacity")
    @classmethod
    def capacity_in_range(cls, value: int) -> int:
        if not MIN_TABLE_CAPACITY <= value <= MAX_TABLE_CAPACITY:
            raise ValueError(TABLE_CAPACITY_OUT_OF_RANGE)
        return value

    def occupy(self) -> None:
        """Seat guests at a free table."""
        if self.status == TableStatus.FREE:
            self.status = TableStatus.OCCUPIED

    def occupy_from_reservation(self) -> None:
        """Seat the guests a reserved table was held for."""
        if self.status == TableStatus.RESERVED:
            self.status = TableStatus.OCCUPIED

    def free(self) -> None:
        """Release the table."""
        self.status = TableStatus.FREE

    def add_order(self, order: Order) -> None:
        """Attach an order. Status checks are left to the caller."""
        self.orders.append(order)

    def __str__(self) -> str:
        return f"Mesa número {self.id} Capacidad: {self.capacity} Estado: {self.status.value}"
