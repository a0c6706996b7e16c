"""Console summaries of dish queries."""
from typing import List, Optional

NO_DISHES = "No existen platos."


def format_dish_list(names: Optional[List[str]]) -> str:
    """Describe every ordered dish."""
    if not names:
        return NO_DISHES
    return f"Platos pedidos: {', '.join(names)}"


def format_dish_count(dish_name: str, count: Optional[int]) -> str:
    """Describe how many times a dish was ordered."""
    count = count or 0
    times = "vez" if count == 1 else "veces"
    return f"El plato '{dish_name}' fue pedido {count} {times}."


def format_most_ordered(names: Optional[List[str]]) -> str:
    """Describe the most ordered dish or dishes."""
    if not names:
        return NO_DISHES
    if len(names) == 1:
        return f"El plato más pedido es {names[0]}."
    return f"Los platos más pedidos son {', '.join(names)}."
