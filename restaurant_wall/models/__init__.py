"""Data models for Restaurant Wall."""

from restaurant_wall.models.restaurant import (
    Cuisine,
    Location,
    PriceRange,
    Restaurant,
    RestaurantDraft,
    restaurant_list_adapter,
)
from restaurant_wall.models.state import (
    CUISINE_FILTER_ALL,
    PRICE_FILTER_ALL,
    AppState,
    SortKey,
    ViewMode,
)

__all__ = [
    "CUISINE_FILTER_ALL",
    "PRICE_FILTER_ALL",
    "AppState",
    "Cuisine",
    "Location",
    "PriceRange",
    "Restaurant",
    "RestaurantDraft",
    "SortKey",
    "ViewMode",
    "restaurant_list_adapter",
]
