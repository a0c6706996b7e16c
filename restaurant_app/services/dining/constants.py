"""Constants for dining room validation."""

# Seating limits for a single table
MIN_TABLE_CAPACITY = 1
MAX_TABLE_CAPACITY = 6

# Dishes must take longer than this to prepare (minutes)
MIN_PREP_TIME_EXCLUSIVE = 1

# Validation messages
DISH_NAME_BLANK = "El nombre del plato no puede estar vacío"
DISH_PRICE_NOT_POSITIVE = "El precio del plato debe ser mayor que 0"
DISH_PREP_TIME_TOO_SHORT = "El tiempo de preparación debe ser mayor a 1 minuto"
INGREDIENT_BLANK = "El ingrediente no puede estar vacío"
TABLE_CAPACITY_OUT_OF_RANGE = (
    f"La capacidad de la mesa debe estar entre {MIN_TABLE_CAPACITY} y {MAX_TABLE_CAPACITY}"
)
FIELD_NOT_NUMERIC = "El valor debe ser numérico"
