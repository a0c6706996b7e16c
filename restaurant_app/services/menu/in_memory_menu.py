"""In-memory menu of dishes."""
import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from restaurant_app.core import config
from restaurant_app.services.dining.models import Dish

logger = logging.getLogger(__name__)

DEFAULT_MENU_FILE = Path(__file__).parent / "data" / "menu.yaml"


class InMemoryMenu:
    """In-memory menu loaded from YAML configuration."""

    def __init__(self, menu_file: Optional[str] = None):
        """Initialize with optional menu file path."""
        if menu_file is None:
            menu_file = config.settings.menu_file or DEFAULT_MENU_FILE
        self.menu_file = Path(menu_file)
        self._dishes: Optional[Dict[str, Dish]] = None

    def _load_dishes(self) -> Dict[str, Dish]:
        """Load dishes from the YAML file, keyed by lowercase name."""
        if self._dishes is None:
            if not self.menu_file.exists():
                # Default menu if file doesn't exist
                logger.warning("Menu file %s not found, using default menu", self.menu_file)
                dishes = [
                    Dish(
                        name="Hamburguesa",
                        price=9.99,
                        prep_time=8,
                        ingredients=["carne", "huevo", "queso", "pan", "tomate"],
                    ),
                    Dish(
                        name="Ensalada",
                        price=7.99,
                        prep_time=5,
                        ingredients=["lechuga", "tomate", "zanahoria", "maíz"],
                    ),
                    Dish(
                        name="Tortilla",
                        price=5.99,
                        prep_time=10,
                        ingredients=["huevo", "patata"],
                    ),
                ]
            else:
                with open(self.menu_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
                dishes = [Dish(**item) for item in data.get("dishes", [])]
            self._dishes = {dish.name.lower().strip(): dish for dish in dishes}
        return self._dishes

    def get_dishes(self) -> List[Dish]:
        """Get every dish on the menu."""
        return list(self._load_dishes().values())

    def get_dish(self, dish_name: str) -> Dish:
        """
        Get a dish by name, case-insensitively.

        The same Dish instance is returned on every call, so orders built
        from the menu share their dishes.

        Raises:
            KeyError: If the dish is not on the menu
        """
        dishes = self._load_dishes()
        key = dish_name.lower().strip()
        if key not in dishes:
            raise KeyError(f"'{dish_name}' is not on the menu")
        return dishes[key]
