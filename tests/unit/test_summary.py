"""Unit tests for console summaries of dish queries."""
import pytest

from restaurant_app.services.dining.summary import (
    format_dish_count,
    format_dish_list,
    format_most_ordered,
)


class TestDishList:
    """Test the ordered dishes line."""

    def test_dish_list(self):
        """Test names are joined with commas."""
        assert format_dish_list(["Tortilla", "Ensalada"]) == "Platos pedidos: Tortilla, Ensalada"

    @pytest.mark.parametrize("names", [None, []])
    def test_no_dishes(self, names):
        """Test None and an empty list both mean nothing to show."""
        assert format_dish_list(names) == "No existen platos."


class TestDishCount:
    """Test the dish count line."""

    def test_single_time(self):
        """Test singular wording for one order."""
        assert format_dish_count("Ensalada", 1) == "El plato 'Ensalada' fue pedido 1 vez."

    def test_many_times(self):
        """Test plural wording for several orders."""
        assert format_dish_count("Ensalada", 4) == "El plato 'Ensalada' fue pedido 4 veces."

    def test_not_ordered(self):
        """Test a missing count is shown as zero."""
        assert format_dish_count("Paella", None) == "El plato 'Paella' fue pedido 0 veces."


class TestMostOrdered:
    """Test the most ordered dishes line."""

    def test_single_dish(self):
        """Test singular wording for one winner."""
        assert format_most_ordered(["Tortilla"]) == "El plato más pedido es Tortilla."

    def test_tied_dishes(self):
        """Test plural wording for ties."""
        assert format_most_ordered(["Tortilla", "Ensalada"]) == (
            "Los platos más pedidos son Tortilla, Ensalada."
        )

    @pytest.mark.parametrize("names", [None, []])
    def test_no_dishes(self, names):
        """Test nothing ordered."""
        assert format_most_ordered(names) == "No existen platos."
