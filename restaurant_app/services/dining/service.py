"""Restaurant service coordinating tables, orders and dish queries."""
import logging
from collections import Counter
from typing import Iterator, List, Optional, Sequence

from restaurant_app.services.dining.models import Dish, Order, Table
from restaurant_app.services.dining.statuses import OrderStatus, TableStatus

logger = logging.getLogger(__name__)


class RestaurantService:
    """
    Coordinates order placement and closing over a fixed set of tables.

    Requests that do not match a table, an order or the expected table
    status are ignored; they are logged but never raised.
    """

    def __init__(self, tables: Sequence[Table]):
        self._tables = tuple(tables)

    @property
    def tables(self) -> Sequence[Table]:
        """Tables managed by this service, in lookup order."""
        return self._tables

    def get_table(self, table_id: int) -> Optional[Table]:
        """Get the first table with the given id."""
        for table in self._tables:
            if table.id == table_id:
                return table
        return None

    def _get_occupied_table(self, table_id: int) -> Optional[Table]:
        table = self.get_table(table_id)
        if table is None:
            logger.debug("Table %s not found, ignoring request", table_id)
            return None
        if table.status != TableStatus.OCCUPIED:
            logger.debug("Table %s is %s, ignoring request", table_id, table.status.value)
            return None
        return table

    def place_order(self, table_id: int, order: Order) -> None:
        """Attach an order to a table if the table is occupied."""
        table = self._get_occupied_table(table_id)
        if table is None:
            return
        table.add_order(order)
        logger.info("Order %s placed at table %s", order.id, table_id)

    def close_order(self, table_id: int, order_id: Optional[int] = None) -> None:
        """
        Mark an order as served.

        Args:
            table_id: Table holding the order
            order_id: Order to close; defaults to the most recently placed one
        """
        table = self._get_occupied_table(table_id)
        if table is None:
            return

        if order_id is not None:
            order = next((o for o in table.orders if o.id == order_id), None)
        else:
            order = table.orders[-1] if table.orders else None

        if order is None:
            logger.debug("No order %s at table %s", order_id, table_id)
            return
        order.status = OrderStatus.SERVED
        logger.info("Order %s at table %s served", order.id, table_id)

    def close_table(self, table_id: int) -> None:
        """Free an occupied table once every order on it has been served."""
        table = self._get_occupied_table(table_id)
        if table is None:
            return
        if not all(order.status == OrderStatus.SERVED for order in table.orders):
            logger.debug("Table %s still has pending orders", table_id)
            return
        table.free()
        logger.info("Table %s freed", table_id)

    def _iter_dishes(self) -> Iterator[Dish]:
        for table in self._tables:
            for order in table.orders:
                yield from order.dishes

    def list_dishes(self) -> Optional[List[str]]:
        """Get the names of all ordered dishes, or None if nothing was ordered."""
        names = [dish.name for dish in self._iter_dishes()]
        return names or None

    def count_dish(self, dish_name: str) -> Optional[int]:
        """Count how many times a dish was ordered. Returns None for zero."""
        count = sum(1 for dish in self._iter_dishes() if dish.name == dish_name)
        return count if count > 0 else None

    def most_ordered_dishes(self) -> Optional[List[str]]:
        """
        Get every dish name tied for the highest order count.

        Returns:
            Names in first-ordered order, or None if nothing was ordered
        """
        counts = Counter(dish.name for dish in self._iter_dishes())
        if not counts:
            return None
        top = max(counts.values())
        return [name for name, count in counts.items() if count == top]
