"""Scripted demonstration of a service at the restaurant."""
from restaurant_app.core.logging import setup_logging
from restaurant_app.services.dining.models import Order, Table
from restaurant_app.services.dining.service import RestaurantService
from restaurant_app.services.dining.statuses import OrderStatus
from restaurant_app.services.dining.summary import (
    format_dish_count,
    format_dish_list,
    format_most_ordered,
)
from restaurant_app.services.menu.in_memory_menu import InMemoryMenu


def main() -> None:
    """Seat two tables, place and close their orders, then report on dishes."""
    setup_logging()

    tables = [
        Table(id=1, capacity=4),
        Table(id=2, capacity=2),
        Table(id=3, capacity=6),
    ]
    service = RestaurantService(tables)

    menu = InMemoryMenu()
    hamburguesa = menu.get_dish("Hamburguesa")
    ensalada = menu.get_dish("Ensalada")
    tortilla = menu.get_dish("Tortilla")
    serranito = menu.get_dish("Serranito")
    carbonara = menu.get_dish("Spagetti carbonara")
    rissotto = menu.get_dish("Rissotto setas")

    hamburguesa.add_ingredient("salsa")
    ensalada.add_ingredient("atún")

    # First table
    tables[0].occupy()

    order1 = Order(
        id=1,
        dishes=[hamburguesa, ensalada, tortilla, serranito],
        status=OrderStatus.PENDING,
    )
    for dish in (hamburguesa, ensalada, tortilla, serranito):
        order1.add_dish(dish)

    print(f"***** Pedido {order1.id} *****")
    print(order1)

    service.place_order(1, order1)

    print(f"***** Mesa {tables[0].id} *****")
    print(tables[0])

    # Second table, two orders
    tables[1].occupy()

    order2 = Order(id=2, dishes=[ensalada, tortilla, serranito])
    for dish in (ensalada, tortilla, serranito):
        order2.add_dish(dish)
    service.place_order(2, order2)

    order3 = Order(id=3, dishes=[carbonara, rissotto])
    for dish in (carbonara, rissotto):
        order3.add_dish(dish)
    service.place_order(2, order3)

    print(f"***** Mesa {tables[1].id} *****")
    print(tables[1])

    # Table 2 keeps order 2 pending, so it stays occupied
    service.close_order(1)
    service.close_table(1)
    service.close_order(2)
    service.close_table(2)

    print(format_dish_list(service.list_dishes()))
    print(format_dish_count("Ensalada", service.count_dish("Ensalada")))
    print(format_most_ordered(service.most_ordered_dishes()))


if __name__ == "__main__":
    main()
