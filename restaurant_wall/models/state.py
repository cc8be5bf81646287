"""Application state model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from restaurant_wall.models.restaurant import Restaurant

# Filter values that let every restaurant through
CUISINE_FILTER_ALL = "All"
PRICE_FILTER_ALL = "all"


class SortKey(str, Enum):
    """Orderings offered by the sort control."""

    NEWEST = "newest"
    OLDEST = "oldest"
    RATING = "rating"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"


class ViewMode(str, Enum):
    """Which panels are shown."""

    LIST = "list"
    MAP = "map"
    BOTH = "both"


class AppState(BaseModel):
    """Everything the presentation layer needs, in one immutable value.

    Change it only through the transition functions in ``restaurant_wall.store``.
    """

    model_config = ConfigDict(frozen=True)

    restaurants: tuple[Restaurant, ...] = Field(
        default=(), description="Restaurants in retrieval order"
    )
    search_term: str = Field(default="", description="Free-text search")
    selected_cuisine: str = Field(
        default=CUISINE_FILTER_ALL, description="Cuisine filter"
    )
    price_filter: str = Field(default=PRICE_FILTER_ALL, description="Price filter")
    sort_by: str = Field(default=SortKey.NEWEST.value, description="Sort key")
    selected_restaurant: str | None = Field(
        None, description="Id of the highlighted restaurant"
    )
    is_loading: bool = Field(default=True, description="A refresh is in progress")
    error: str | None = Field(None, description="Message shown to the user")
    view_mode: ViewMode = Field(default=ViewMode.BOTH, description="Visible panels")
