"""Shared test fixtures and configuration."""
import pytest
from pathlib import Path

from restaurant_app.core.config import Settings
from restaurant_app.services.dining.models import Dish, Order, Table
from restaurant_app.services.dining.service import RestaurantService
from restaurant_app.services.menu.in_memory_menu import InMemoryMenu


@pytest.fixture
def test_settings():
    """Override settings for testing."""
    return Settings(
        _env_file=None,
        currency_symbol="€",
        log_level="WARNING",
        menu_file=None,
    )


@pytest.fixture(autouse=True)
def override_settings(test_settings, monkeypatch):
    """Keep tests independent of the environment and any .env file."""
    monkeypatch.setattr("restaurant_app.core.config.settings", test_settings)
    return test_settings


@pytest.fixture
def test_menu_path():
    """Return path to test menu YAML file."""
    return Path(__file__).parent / "fixtures" / "test_menu.yaml"


@pytest.fixture
def test_menu(test_menu_path):
    """Create menu with test data."""
    return InMemoryMenu(menu_file=str(test_menu_path))


@pytest.fixture
def hamburguesa():
    """Burger dish."""
    return Dish(
        name="Hamburguesa",
        price=9.99,
        prep_time=8,
        ingredients=["carne", "huevo", "queso", "pan", "tomate"],
    )


@pytest.fixture
def ensalada():
    """Salad dish."""
    return Dish(
        name="Ensalada",
        price=7.99,
        prep_time=5,
        ingredients=["lechuga", "tomate", "zanahoria", "maíz"],
    )


@pytest.fixture
def tortilla():
    """Omelette dish."""
    return Dish(name="Tortilla", price=5.99, prep_time=10, ingredients=["huevo", "patata"])


@pytest.fixture
def tables():
    """Three free tables numbered 1 to 3."""
    return [
        Table(id=1, capacity=4),
        Table(id=2, capacity=2),
        Table(id=3, capacity=6),
    ]


@pytest.fixture
def service(tables):
    """Restaurant service over the test tables."""
    return RestaurantService(tables)


@pytest.fixture
def occupied_table(tables):
    """Table 1, occupied and without orders."""
    tables[0].occupy()
    return tables[0]


@pytest.fixture
def make_order():
    """Factory for pending orders."""
    def _make_order(order_id, *dishes):
        return Order(id=order_id, dishes=list(dishes))
    return _make_order
